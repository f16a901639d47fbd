# src/rfsim_signal/config/parser.py
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import cerberus
import pint
import yaml

from ..analogue_models.base import ANALOGUE_MODEL_REGISTRY, AnalogueModel
from ..attenuation.lazy import LazyAttenuatedSignal
from ..geometry import Coord
from ..signal.signal import Signal
from ..spectrum.base import SPECTRUM_REGISTRY, Spectrum
from ..units import Quantity
from .exceptions import ConfigParsingError, ConfigSchemaError

logger = logging.getLogger(__name__)

ID_REGEX = r"^[a-zA-Z_][a-zA-Z0-9_]*$"


class EnhancedValidator(cerberus.Validator):
    """Custom Cerberus validator enforcing identifier naming for registry keys."""

    def _validate_id_regex(self, constraint, field, value):
        """
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and isinstance(value, str) and not re.match(ID_REGEX, value):
            self._error(
                field,
                f"Identifier '{value}' is invalid. Identifiers must start with a letter or underscore, "
                "and can only contain letters, numbers, and underscores."
            )


@dataclass(frozen=True)
class AttenuationChainConfig:
    """
    A validated attenuation chain: the spectrum signals live on and the analogue
    models to apply to them, in application order.

    The model instances are shared by every LazyAttenuatedSignal created by `wrap`.
    """
    spectrum: Spectrum
    analogue_models: Tuple[AnalogueModel, ...]
    source: str = "<string>"

    def wrap(self, signal: Signal, sender_pos: Coord, receiver_pos: Coord) -> LazyAttenuatedSignal:
        """Builds a LazyAttenuatedSignal applying this chain to `signal`."""
        signal.require_spectrum(self.spectrum, "attenuation chain")
        return LazyAttenuatedSignal(signal, self.analogue_models, sender_pos, receiver_pos)


class AttenuationChainParser:
    """
    Parses and validates attenuation chain descriptions written in YAML:

        spectrum: Spectrum80211
        analogue_models:
          - type: SimplePathloss
            parameters: {alpha: 2.0}

    Structural validation uses a Cerberus schema; names are then resolved against
    SPECTRUM_REGISTRY and ANALOGUE_MODEL_REGISTRY, and parameter values are checked
    against each model's declared dimensions with pint.
    """
    _id_rule = {"type": "string", "required": True, "empty": False, "id_regex": True}

    _model_schema = {
        "type": _id_rule,
        "parameters": {
            "type": "dict",
            "required": False,
            "keysrules": {"type": "string", "id_regex": True},
            "valuesrules": {"type": ["string", "number"]},
        },
    }

    _schema = {
        "spectrum": _id_rule,
        "analogue_models": {
            "type": "list",
            "required": True,
            "schema": {"type": "dict", "schema": _model_schema},
        },
    }

    def __init__(self):
        self._validator = EnhancedValidator(self._schema)
        self._validator.allow_unknown = False
        logger.info("AttenuationChainParser initialized with strict structural validation rules.")

    def parse(self, yaml_path: Union[str, Path]) -> AttenuationChainConfig:
        """Loads, validates and builds the attenuation chain described by a YAML file."""
        path = Path(yaml_path).resolve()
        logger.info(f"Parsing attenuation chain from file: {path}")
        if not path.is_file():
            raise ConfigParsingError(details=f"Configuration file not found at path: {path}", file_path=str(path))
        try:
            text = path.read_text(encoding="utf-8")
        except (PermissionError, OSError) as e:
            raise ConfigParsingError(details=f"Could not read file: {e}", file_path=str(path)) from e
        return self.parse_string(text, source=str(path))

    def parse_string(self, text: str, source: str = "<string>") -> AttenuationChainConfig:
        """Validates and builds the attenuation chain described by a YAML document."""
        content = self._load_yaml(text, source)
        if not self._validator.validate(content):
            raise ConfigSchemaError(errors=self._validator.errors, file_path=source)
        document = self._validator.document

        errors: Dict[str, List[str]] = {}
        spectrum = SPECTRUM_REGISTRY.get(document["spectrum"])
        if spectrum is None:
            errors["spectrum"] = [
                f"Unknown spectrum '{document['spectrum']}'. Available spectra: {sorted(SPECTRUM_REGISTRY)}."
            ]

        models: List[AnalogueModel] = []
        for position, model_data in enumerate(document["analogue_models"]):
            field = f"analogue_models.{position}"
            model = self._build_model(model_data, field, errors)
            if model is not None:
                models.append(model)

        if errors:
            raise ConfigSchemaError(errors=errors, file_path=source)

        logger.info(f"Built attenuation chain on '{spectrum.name}' with {len(models)} analogue model(s) from {source}.")
        return AttenuationChainConfig(spectrum=spectrum, analogue_models=tuple(models), source=source)

    def _build_model(self, model_data: Dict[str, Any], field: str, errors: Dict[str, List[str]]) -> Optional[AnalogueModel]:
        type_str = model_data["type"]
        model_cls = ANALOGUE_MODEL_REGISTRY.get(type_str)
        if model_cls is None:
            errors[f"{field}.type"] = [
                f"Unknown analogue model type '{type_str}'. Available types: {sorted(ANALOGUE_MODEL_REGISTRY)}."
            ]
            return None

        declared = model_cls.declare_parameters()
        raw_params = model_data.get("parameters", {})
        kwargs: Dict[str, float] = {}
        ok = True
        for name in sorted(set(raw_params) - set(declared)):
            errors[f"{field}.parameters.{name}"] = [f"Parameter is not declared by '{type_str}'. Declared parameters: {sorted(declared)}."]
            ok = False
        for name, dimension in declared.items():
            if name not in raw_params:
                errors[f"{field}.parameters.{name}"] = [f"Missing required parameter of '{type_str}' (dimension '{dimension}')."]
                ok = False
                continue
            try:
                kwargs[name] = self._to_magnitude(raw_params[name], dimension)
            except (pint.PintError, ValueError, TypeError, AttributeError) as e:
                errors[f"{field}.parameters.{name}"] = [f"Value {raw_params[name]!r} is not a valid '{dimension}' quantity: {e}"]
                ok = False
        if not ok:
            return None

        try:
            return model_cls(**kwargs)
        except (ValueError, TypeError) as e:
            errors[field] = [f"Could not instantiate '{type_str}': {e}"]
            return None

    @staticmethod
    def _to_magnitude(raw_value: Union[str, float, int], dimension: str) -> float:
        """Converts a raw number or pint string into a float magnitude in `dimension`'s base unit."""
        qty = Quantity(raw_value) if isinstance(raw_value, str) else Quantity(raw_value, 'dimensionless')
        if not qty.is_compatible_with(dimension):
            raise pint.DimensionalityError(qty.units, Quantity(1, dimension).units)
        return float(qty.to(dimension).magnitude)

    @staticmethod
    def _load_yaml(text: str, source: str) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML document."""
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            raise ConfigParsingError(details="The YAML document is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ConfigParsingError(details="The root of the YAML document must be a dictionary (mapping).", file_path=source)
        return content
