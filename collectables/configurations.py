from __future__ import annotations

from dataclasses import Field, dataclass, field
from typing import Any, ClassVar, Literal, TypeVar, dataclass_transform

from collectables.file_len_to_path_set import FileLenToPathSet, SortedFileLenToPathSet

ConfigurationKind = Literal["boolean", "integer"]

TRUE_VALUES = {"yes", "true", "on", "1"}
FALSE_VALUES = {"no", "false", "off", "0"}


class ConfigurationError(Exception):
    pass


@dataclass
class ConfigurationFieldData:
    type_: ConfigurationKind = "boolean"
    minimum: int | None = None
    _name: str | None = None
    _field_name: str | None = None

    @property
    def name(self) -> str:
        if self._name is None:
            raise ValueError()
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def field_name(self) -> str:
        if self._field_name is None:
            raise ValueError()
        return self._field_name

    @field_name.setter
    def field_name(self, value: str) -> None:
        self._field_name = value


def configuration(
    default: bool | int,
    type_: ConfigurationKind = "boolean",
    minimum: int | None = None,
) -> Any:  # noqa:ANN401
    return field(
        default=default,
        metadata={
            "configuration": ConfigurationFieldData(type_, minimum),
        },
    )


@dataclass_transform()
@dataclass
class ConfigurationBase:
    FIELD_BY_NAME: ClassVar[dict[str, ConfigurationFieldData]] = {}


ConfigurationType = TypeVar("ConfigurationType", bound=ConfigurationBase)


def configurations(cls: type[ConfigurationType]) -> type[ConfigurationType]:
    for name, f in cls.__dict__.items():
        if not isinstance(f, Field):
            continue

        configuration_field_data = f.metadata.get("configuration")
        if configuration_field_data is None:
            continue

        configuration_field_data.field_name = name
        configuration_field_data.name = name.replace("_", "-")
        cls.FIELD_BY_NAME[configuration_field_data.name] = configuration_field_data
    return dataclass(cls)


def parse_boolean(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigurationError(f"argument must be one of {sorted(TRUE_VALUES | FALSE_VALUES)}, not {value!r}")


def parse_integer(value: str, minimum: int | None) -> int:
    try:
        result = int(value)
    except ValueError:
        raise ConfigurationError(f"argument must be an integer, not {value!r}") from None
    if minimum is not None and result < minimum:
        raise ConfigurationError(f"argument must be at least {minimum}, not {result}")
    return result


@configurations
class ScanConfigurations(ConfigurationBase):
    ordered: bool = configuration(default=True)
    recursive: bool = configuration(default=True)
    follow_symlinks: bool = configuration(default=False)
    min_length: int = configuration(default=1, type_="integer", minimum=0)
    min_count: int = configuration(default=2, type_="integer", minimum=1)

    @classmethod
    def get_field_data(cls, name: str) -> ConfigurationFieldData:
        try:
            return cls.FIELD_BY_NAME[name]
        except KeyError:
            raise ConfigurationError(f"unknown configuration {name!r}") from None

    @classmethod
    def get_field_name(cls, name: str) -> str:
        return cls.get_field_data(name).field_name

    def set_value(self, name: str, value: str) -> None:
        field_data = self.get_field_data(name)

        if field_data.type_ == "integer":
            setattr(self, field_data.field_name, parse_integer(value, field_data.minimum))
        else:
            setattr(self, field_data.field_name, parse_boolean(value))

    def info(self) -> dict[str, bool | int]:
        return {name: getattr(self, f.field_name) for name, f in self.FIELD_BY_NAME.items()}

    def new_path_set(self) -> SortedFileLenToPathSet | FileLenToPathSet:
        if self.ordered:
            return SortedFileLenToPathSet()
        return FileLenToPathSet()
