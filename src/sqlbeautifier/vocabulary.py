"""Vocabulary tables for SQL word classification.

Immutable, process-wide constants initialized at import. The scanner is
the only component that classifies words against them; the formatter
only looks at the subsets that drive layout.

Classification is a pure function of the word's upper-cased spelling:
keywords win over functions (the tables are disjoint), anything else is
an identifier.
"""

from sqlbeautifier.tokens import TokenKind

# Clause and control words
KEYWORDS: frozenset[str] = frozenset(
    {
        "SELECT", "FROM", "WHERE", "INSERT", "UPDATE", "DELETE", "CREATE", "DROP", "ALTER",
        "TABLE", "INDEX", "VIEW", "PROCEDURE", "FUNCTION", "TRIGGER", "DATABASE", "SCHEMA",
        "JOIN", "INNER", "LEFT", "RIGHT", "FULL", "OUTER", "CROSS", "ON", "USING",
        "AND", "OR", "NOT", "IN", "EXISTS", "BETWEEN", "LIKE", "ILIKE", "IS", "NULL",
        "AS", "DISTINCT", "ALL", "ANY", "SOME",
        "CASE", "WHEN", "THEN", "ELSE", "END",
        "GROUP", "BY", "HAVING", "ORDER", "ASC", "DESC",
        "LIMIT", "OFFSET", "FETCH", "FIRST", "NEXT", "ONLY", "ROWS",
        "UNION", "INTERSECT", "EXCEPT", "MINUS",
        "INTO", "VALUES", "SET",
        "BEGIN", "IF", "WHILE", "LOOP", "RETURN",
        "DECLARE", "EXECUTE", "EXEC",
        "WITH", "RECURSIVE", "CTE",
        "PARTITION", "OVER", "WINDOW",
        "CAST", "CONVERT", "COALESCE", "NULLIF",
        "PRIMARY", "KEY", "FOREIGN", "REFERENCES", "UNIQUE", "CHECK", "DEFAULT",
        "CONSTRAINT", "CASCADE", "RESTRICT",
        "GRANT", "REVOKE", "DENY",
        "COMMIT", "ROLLBACK", "SAVEPOINT", "TRANSACTION",
        "PUBLIC", "TRUE", "FALSE",
    }
)  # fmt: skip

# Built-in callables
FUNCTIONS: frozenset[str] = frozenset(
    {
        "COUNT", "SUM", "AVG", "MIN", "MAX",
        "UPPER", "LOWER", "TRIM", "LTRIM", "RTRIM", "SUBSTRING", "CONCAT", "LENGTH", "LEN",
        "REPLACE", "CHARINDEX", "PATINDEX",
        "NOW", "GETDATE", "CURRENT_TIMESTAMP", "DATE", "TIME", "DATETIME",
        "DATEADD", "DATEDIFF", "DATEPART", "YEAR", "MONTH", "DAY",
        "ROUND", "CEILING", "FLOOR", "ABS", "POWER", "SQRT",
        "ROW_NUMBER", "RANK", "DENSE_RANK", "NTILE",
        "LEAD", "LAG", "FIRST_VALUE", "LAST_VALUE",
        "STRING_AGG", "ARRAY_AGG", "JSON_AGG",
    }
)  # fmt: skip

JOIN_QUALIFIERS: frozenset[str] = frozenset({"INNER", "LEFT", "RIGHT", "FULL", "CROSS"})

SET_OPERATIONS: frozenset[str] = frozenset({"UNION", "INTERSECT", "EXCEPT", "MINUS"})

# Clauses laid out on their own line at the statement level
CLAUSE_KEYWORDS: frozenset[str] = frozenset({"WHERE", "GROUP", "HAVING", "ORDER"})

# Keywords that begin a new formatted section
MAJOR_CLAUSES: frozenset[str] = (
    frozenset({"SELECT", "FROM", "JOIN"})
    | CLAUSE_KEYWORDS
    | JOIN_QUALIFIERS
    | SET_OPERATIONS
)

TWO_CHAR_OPERATORS: tuple[str, ...] = ("<=", ">=", "<>", "!=", "||", "&&")

SINGLE_CHAR_OPERATORS: frozenset[str] = frozenset("=<>+-*/%(),;.")

# Keywords written like calls: COALESCE(x, 0), CAST(a AS int)
CALLABLE_KEYWORDS: frozenset[str] = frozenset({"CAST", "CONVERT", "COALESCE", "NULLIF"})

# Rendered with one space on each side by the formatter
BINARY_OPERATORS: frozenset[str] = frozenset(
    {"=", "<", ">", "<=", ">=", "<>", "!=", "+", "-", "*", "/", "%", "||", "&&"}
)


def classify_word(word: str) -> tuple[TokenKind, str]:
    """Classify a scanned word run.

    Args:
        word: Word as it appears in the source

    Returns:
        (kind, value) where keyword/function values are upper-cased and
        identifiers keep their original spelling.

    Examples:
        >>> classify_word("select")
        (<TokenKind.KEYWORD: 'keyword'>, 'SELECT')
        >>> classify_word("Count")
        (<TokenKind.FUNCTION: 'function'>, 'COUNT')
        >>> classify_word("users")
        (<TokenKind.IDENTIFIER: 'identifier'>, 'users')
    """
    upper = word.upper()
    if upper in KEYWORDS:
        return TokenKind.KEYWORD, upper
    if upper in FUNCTIONS:
        return TokenKind.FUNCTION, upper
    return TokenKind.IDENTIFIER, word
