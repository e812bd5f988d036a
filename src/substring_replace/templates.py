"""Default file contents written by the ``init`` command."""

DEFAULT_SCRIPT_YAML = """\
# SubstringReplace edit script.
#
# Every task reads its input file, applies its steps in order and writes the
# result to 'output' (or back to 'input' when 'output' is omitted).
# Indices count characters, not bytes; negative indices count from the end.

shortcuts:
  mark-reviewed:
    - op: 'prepend'
      prefix: '[reviewed] '

tasks:
  - name: 'Example task'
    enabled: false
    input: 'example.txt'
    output: 'example.out.txt'
    steps:
      - op: 'substring_replace'
        replacement: 'cannot'
        start: 3
        end: 8
      - op: 'insert_between'
        insert: 'document'
        start_pattern: '-'
        end_pattern: '.'
      - use: 'mark-reviewed'
"""
