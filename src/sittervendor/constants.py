from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Upstream organisation hosting the engine and every grammar repository.
UPSTREAM_OWNER: str = 'tree-sitter'
ENGINE_REPOSITORY: str = 'tree-sitter'
ENGINE_DISPLAY_NAME: str = 'tree-sitter'

RAW_HOST: str = 'https://raw.githubusercontent.com'
GIT_HOST: str = 'https://github.com'

# Release tags of grammar repositories look like "v0.16.0".
GRAMMAR_TAG_PREFIX: str = 'v'
# Engine tags historically come with and without the prefix.
ENGINE_TAG_PREFIX: str = ''

SCRATCH_DIR_NAME: str = 'vendor'
# Aggregate engine source that #includes every other .c file.
ENGINE_AGGREGATE_SOURCE: str = 'lib.c'

PARSER_HEADER: str = 'parser.h'
SHARED_HEADER_NAME: str = 'scanner.h'
# C-family sources a grammar may ship; Go files next to them are never touched.
VENDORED_SUFFIXES: tuple[str, ...] = ('.c', '.cc', '.cpp', '.cxx', '.h', '.hh', '.hpp', '.inc')

DEFAULT_GO_MODULE: str = 'github.com/smacker/go-tree-sitter'
