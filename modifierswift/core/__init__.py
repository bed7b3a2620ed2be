# Lazy imports to avoid triggering full dependency chain.
# This allows targeted imports like `from modifierswift.core.analyzer import parse_type`
# without loading the tree-sitter grammar.

__all__ = [
    "TypeAnalyzer",
    "TypeParser",
    "parse_type",
    "categorize",
    "Category",
    "EnumGenerator",
    "GeneratedCode",
    "GeneratedCodeWriter",
    "InterfaceParser",
    "ModifierInfo",
    "ParameterInfo",
]

_IMPORT_MAP = {
    "TypeAnalyzer": ".analyzer",
    "TypeParser": ".analyzer",
    "parse_type": ".analyzer",
    "categorize": ".analyzer",
    "Category": ".analyzer",
    "EnumGenerator": ".generator",
    "GeneratedCode": ".generator",
    "GeneratedCodeWriter": ".generator",
    "InterfaceParser": ".ast_parser",
    "ModifierInfo": ".ast_parser",
    "ParameterInfo": ".ast_parser",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'modifierswift.core' has no attribute {name}")
