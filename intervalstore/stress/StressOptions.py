from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Union, get_args, get_origin


@dataclass
class StressOptions:
    # rounds
    iterations: int = 3500

    # key space
    min_key: int = -150
    max_key: int = 150

    # value space (inclusive character range)
    min_value: str = "!"
    max_value: str = "~"

    # random seed, None picks a fresh one
    seed: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.iterations < 0:
            raise ValueError(f"Iterations must not be negative, got {self.iterations}.")
        if self.min_key > self.max_key:
            raise ValueError(f"Key range [{self.min_key}, {self.max_key}] is empty.")
        if len(self.min_value) != 1 or len(self.max_value) != 1:
            raise ValueError("Value range bounds have to be single characters.")
        if self.min_value > self.max_value:
            raise ValueError(f"Value range [{self.min_value!r}, {self.max_value!r}] is empty.")

    def overwrite_options(self, options: List[str]) -> None:
        # Convert name=value pairs to a dictionary
        options_dict: Dict[str, Any] = {}
        for option in options:
            if "=" not in option:
                raise ValueError(f"Invalid format for option '{option}', expected 'name=value'.")
            name, value = option.split("=", 1)
            options_dict[name] = value

        known_names = {field.name for field in fields(self)}
        unknown_names = sorted(set(options_dict) - known_names)
        if unknown_names:
            raise ValueError(f"Unknown option(s): {', '.join(unknown_names)}.")

        # Convert string values to their correct types based on the dataclass fields
        for field in fields(self):
            if field.name in options_dict:
                try:
                    setattr(self, field.name, _convert(field.type, options_dict[field.name]))
                except ValueError as e:
                    raise ValueError(f"Invalid type for field '{field.name}': {e}")

        self.validate()


def _convert(field_type: Any, value: str) -> Any:
    if get_origin(field_type) is Union:
        if value.lower() == "none":
            return None
        field_type = next(t for t in get_args(field_type) if t is not type(None))
    return field_type(value)
