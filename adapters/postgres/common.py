"""
Helpers shared by the PostgreSQL repositories.
"""

PAGE_SIZE = 20

# Pages are 32-bit, so the offset always fits a bigint
MAX_PAGE = 2**31 - 1


def get_offset(page: int, page_size: int = PAGE_SIZE) -> int:
    """
    Get the row offset of a 1-based page.

    Pages below 1 are treated as the first page and pages above MAX_PAGE
    as MAX_PAGE.

    Examples:
        >>> get_offset(0)
        0
        >>> get_offset(2)
        20
    """
    page = min(max(page, 1), MAX_PAGE)
    return (page - 1) * page_size


def affected_rows(status: str) -> int:
    """Row count of an asyncpg command tag such as ``UPDATE 1``."""
    return int(status.rsplit(" ", 1)[-1])
