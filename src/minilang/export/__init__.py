"""minilang export — source text from the AST.

Public API::

    from minilang.export import to_source
    text = to_source(program_or_statement)
"""

from .source import SourceWriter, to_source

__all__ = ["SourceWriter", "to_source"]
