from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from typing import Any, Dict, List, Optional

from phpsolver.types import TypesMap, parse_types


def coerce_types(value: Any) -> Any:
    if isinstance(value, str):
        return parse_types(value)
    if value is None:
        return TypesMap()
    return value


class Descriptor(BaseModel):
    """
    Base for index descriptors. Descriptors are read-only once built.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class TypedDescriptor(Descriptor):
    """
    A descriptor carrying a declared type set. `typ` accepts a TypesMap
    or its textual form and is written back as text.
    """
    typ: TypesMap = Field(default_factory=TypesMap)

    @field_validator("typ", mode="before")
    @classmethod
    def parse_typ(cls, value: Any) -> Any:
        return coerce_types(value)

    @field_serializer("typ")
    def dump_typ(self, typ: TypesMap) -> str:
        return str(typ)


class ParamInfo(TypedDescriptor):
    """
    A declared function or method parameter.
    """
    name: str


class FuncInfo(TypedDescriptor):
    """
    A free function or a method. `typ` is the declared return type.
    """
    name: str = ""
    params: List[ParamInfo] = Field(default_factory=list)
    is_static: bool = False
    is_abstract: bool = False


class PropertyInfo(TypedDescriptor):
    """
    A declared class property.
    """
    is_static: bool = False


class ConstantInfo(TypedDescriptor):
    """
    A global or class constant.
    """
    value: Optional[str] = None


class ClassInfo(Descriptor):
    """
    A class, trait or interface as the indexer saw it.

    `traits` and `interfaces` keep declaration order so lookups visit
    them deterministically. `parent_interfaces` lists the interfaces an
    interface extends (interfaces allow multiple inheritance).
    """
    name: str
    parent: str = ""
    traits: List[str] = Field(default_factory=list)
    interfaces: List[str] = Field(default_factory=list)
    parent_interfaces: List[str] = Field(default_factory=list)
    methods: Dict[str, FuncInfo] = Field(default_factory=dict)
    properties: Dict[str, PropertyInfo] = Field(default_factory=dict)
    constants: Dict[str, ConstantInfo] = Field(default_factory=dict)
    is_interface: bool = False
    is_trait: bool = False

    @field_validator("traits", "interfaces", "parent_interfaces")
    @classmethod
    def dedupe_names(cls, names: List[str]) -> List[str]:
        return list(dict.fromkeys(names))


class IndexSnapshot(BaseModel):
    """
    On-disk form of a populated symbol index.
    """
    classes: Dict[str, ClassInfo] = Field(default_factory=dict)
    traits: Dict[str, ClassInfo] = Field(default_factory=dict)
    functions: Dict[str, FuncInfo] = Field(default_factory=dict)
    constants: Dict[str, ConstantInfo] = Field(default_factory=dict)
    globals: Dict[str, TypesMap] = Field(default_factory=dict)
    indexing_complete: bool = True

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @model_validator(mode="before")
    @classmethod
    def fill_names(cls, data: Any) -> Any:
        # Entries are keyed by name; the name inside each entry may be omitted.
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for section in ("classes", "traits", "functions"):
            entries = data.get(section)
            if isinstance(entries, dict):
                data[section] = {
                    name: {"name": name, **entry} if isinstance(entry, dict) else entry
                    for name, entry in entries.items()
                }
        return data

    @field_validator("globals", mode="before")
    @classmethod
    def parse_globals(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {name: coerce_types(typ) for name, typ in value.items()}
        return value

    @field_serializer("globals")
    def dump_globals(self, value: Dict[str, TypesMap]) -> Dict[str, str]:
        return {name: str(typ) for name, typ in value.items()}
