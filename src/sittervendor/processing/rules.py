from __future__ import annotations

"""Rewrite rules that flatten upstream include paths.

Vendored files live in one flat directory per language (and the engine in the
destination root), so every namespaced include has to point at a sibling.
"""

from sittervendor.core.models import RewriteRule

# "tree_sitter/api.h" -> "api.h" inside engine sources.
ENGINE_NAMESPACE_RULE = RewriteRule(
    pattern=r'"tree_sitter/',
    replacement='"',
    expect='required',
    description='engine headers',
)

# "unicode/utf8.h" -> "utf8.h"
UNICODE_NAMESPACE_RULE = RewriteRule(
    pattern=r'"unicode/',
    replacement='"',
    expect='required',
    description='unicode headers',
)

# <tree_sitter/parser.h> -> "parser.h" inside grammar sources.
CANONICAL_PARSER_RULE = RewriteRule(
    pattern=r'<tree_sitter/parser\.h>',
    replacement='"parser.h"',
    description='canonical parser include',
)

# "../../common/scanner.h" -> "scanner.h" inside variant sources.
SHARED_SCANNER_RULE = RewriteRule(
    pattern=r'"\.\./\.\./common/scanner\.h"',
    replacement='"scanner.h"',
    description='shared scanner header',
)
