"""
Response codes shared by the data model, loaders and estimators.
"""

CORRECT_VALUE = 1
INCORRECT_VALUE = 0

# Sentinel stored in the int8 response matrix for a missing response
MISSING_VALUE = -1

VALID_RESPONSE_CODES = frozenset(
    {INCORRECT_VALUE, CORRECT_VALUE, MISSING_VALUE}
)
