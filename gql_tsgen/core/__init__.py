"""Core modules for GraphQL to TypeScript code generation."""

from .config import GeneratorConfig, OUTPUT_DIRECTORIES, RESERVED_NAMES
from .errors import (
    DuplicateRootOperation,
    GeneratorError,
    MissingRootOperation,
    OutputSinkError,
    ParseError,
    UnsupportedTypeShape,
)
from .extractor import ArtifactExtractor
from .generator import CodeGenerator
from .hooks import (
    ExcludePrefix,
    HeaderComment,
    HookChain,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    CATEGORY_ORDER,
    ArtifactCategory,
    IRArtifactSet,
    IREnum,
    IREnumValue,
    IRField,
    IRInputType,
    IRObjectType,
    IROperation,
    IRTypeRef,
)
from .parser import load_schema, parse_schema
from .renderer import JinjaRenderer, Renderer
from .resolver import resolve_type
from .scalars import DEFAULT_SCALAR_MAP, DEFAULT_SCALARS, ScalarMap
from .writer import ArtifactWriter, FileSystemSink, MemorySink, OutputFile, OutputSink

__all__ = [
    # Config
    "GeneratorConfig",
    "OUTPUT_DIRECTORIES",
    "RESERVED_NAMES",
    # Errors
    "GeneratorError",
    "ParseError",
    "UnsupportedTypeShape",
    "MissingRootOperation",
    "DuplicateRootOperation",
    "OutputSinkError",
    # IR types
    "CATEGORY_ORDER",
    "ArtifactCategory",
    "IRArtifactSet",
    "IREnum",
    "IREnumValue",
    "IRField",
    "IRInputType",
    "IRObjectType",
    "IROperation",
    "IRTypeRef",
    # Scalars
    "DEFAULT_SCALARS",
    "DEFAULT_SCALAR_MAP",
    "ScalarMap",
    # Pipeline
    "load_schema",
    "parse_schema",
    "resolve_type",
    "ArtifactExtractor",
    "Renderer",
    "JinjaRenderer",
    "OutputFile",
    "OutputSink",
    "FileSystemSink",
    "MemorySink",
    "ArtifactWriter",
    "CodeGenerator",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "ExcludePrefix",
    "HeaderComment",
    "HookChain",
]
