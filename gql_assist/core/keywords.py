"""Reserved words of the target languages.

GraphQL names match `[_A-Za-z][_0-9A-Za-z]*`, which are already valid
identifiers in the supported targets; only reserved words need escaping.
"""

# Java keywords at the highest language level, the literals, and `_`
JAVA_KEYWORDS = frozenset({
    'abstract', 'assert', 'boolean', 'break', 'byte', 'case', 'catch',
    'char', 'class', 'const', 'continue', 'default', 'do', 'double',
    'else', 'enum', 'extends', 'final', 'finally', 'float', 'for', 'goto',
    'if', 'implements', 'import', 'instanceof', 'int', 'interface', 'long',
    'native', 'new', 'package', 'private', 'protected', 'public', 'return',
    'short', 'static', 'strictfp', 'super', 'switch', 'synchronized',
    'this', 'throw', 'throws', 'transient', 'try', 'void', 'volatile',
    'while', 'true', 'false', 'null', '_',
})

_RESERVED_WORDS = {
    "java": JAVA_KEYWORDS,
}

TARGETS = frozenset(_RESERVED_WORDS)


def reserved_words(target: str) -> frozenset[str]:
    """Return the reserved words of a target language."""
    try:
        return _RESERVED_WORDS[target]
    except KeyError:
        raise ValueError(f"Unknown target language: {target}") from None
