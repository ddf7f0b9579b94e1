# Centralized database and collection names to prevent drift.

DEFAULT_DB_NAME = "solutions"

COL_SOLUTION_REVIEWS = "solutionReviews"
COL_LOOKUPS = "lookups"
COL_QUERIES = "queries"

# Creation order matters: a failed run halts at the first name that errors.
PROVISIONED_COLLECTIONS = (COL_SOLUTION_REVIEWS, COL_LOOKUPS, COL_QUERIES)

# ICU secondary strength: case differences are ignored when comparing strings.
COLLATION_LOCALE = "en"
COLLATION_STRENGTH = 2
CASE_INSENSITIVE_COLLATION = {"locale": COLLATION_LOCALE, "strength": COLLATION_STRENGTH}

# Options the server fills in when a collation only names locale/strength.
# Any other value (e.g. caseLevel=True) changes how strings compare.
ICU_COLLATION_DEFAULTS = {
    "caseLevel": False,
    "caseFirst": "off",
    "numericOrdering": False,
    "alternate": "non-ignorable",
    "maxVariable": "punct",
    "normalization": False,
    "backwards": False,
}
