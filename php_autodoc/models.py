"""Data models for extracted declarations and generation results."""

from dataclasses import dataclass, field
from pathlib import Path

NAMESPACE_SEPARATOR = "\\"

DECLARATION_KINDS = ("class", "interface", "mixin")
VISIBILITIES = ("public", "protected", "private")


@dataclass(frozen=True)
class Parameter:
    """A single method parameter."""

    name: str
    type: str | None = None
    default: str | None = None  # literal text, e.g. 'USD' or []
    by_ref: bool = False
    variadic: bool = False


@dataclass(frozen=True)
class Method:
    """A method declared on a class, interface or mixin."""

    name: str
    visibility: str = "public"
    is_static: bool = False
    is_abstract: bool = False
    is_final: bool = False
    parameters: list[Parameter] = field(default_factory=list)
    return_type: str | None = None
    doc_comment: str | None = None


@dataclass(frozen=True)
class Property:
    """A property declared on a class or mixin."""

    name: str
    visibility: str = "public"
    is_static: bool = False
    type: str | None = None
    default: str | None = None
    doc_comment: str | None = None


@dataclass
class Declaration:
    """A class-like declaration extracted from one source file."""

    name: str
    kind: str  # class / interface / mixin
    namespace: str | None = None
    doc_comment: str | None = None
    super_type: str | None = None
    implemented_contracts: list[str] = field(default_factory=list)
    mixins: list[str] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)
    properties: list[Property] = field(default_factory=list)

    @property
    def fqn(self) -> str:
        """Fully-qualified name: namespace plus simple name."""
        if self.namespace:
            return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.name}"
        return self.name


@dataclass
class ParsedFile:
    """A scanned source file together with the declarations it contains."""

    source_path: Path  # absolute
    relative_path: str  # forward slashes, relative to its source directory
    page_path: str  # relative_path with the page suffix
    declarations: list[Declaration] = field(default_factory=list)


@dataclass
class GenerationStats:
    """Aggregate counts reported by a generation run."""

    files_scanned: int = 0
    declarations_documented: int = 0
    methods_documented: int = 0
    properties_documented: int = 0

    def as_rows(self) -> list[list[str]]:
        """Return the counts as Metric / Count table rows."""
        return [
            ["Files scanned", str(self.files_scanned)],
            ["Declarations documented", str(self.declarations_documented)],
            ["Methods documented", str(self.methods_documented)],
            ["Properties documented", str(self.properties_documented)],
        ]
