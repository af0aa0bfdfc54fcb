"""
Mappers: pure transforms from validated requests to records, partial-update
field maps and bare identifiers. Only the user mappers hash passwords.
"""
