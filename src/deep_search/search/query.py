"""Translation of domain filters into provider query syntax."""


def build_query(
    query: str,
    include_domains: list[str] | None = None,
    exclude_domains: list[str] | None = None,
) -> str:
    """Append ``site:`` clauses for domain filters to ``query``.

    Included domains are OR'd together; excluded domains are each negated.

    >>> build_query("rust", ["a.com", "b.com"], ["c.com"])
    'rust site:a.com OR site:b.com -site:c.com'
    """
    search_query = query
    if include_domains:
        search_query += " " + " OR ".join(f"site:{domain}" for domain in include_domains)
    if exclude_domains:
        search_query += " " + " ".join(f"-site:{domain}" for domain in exclude_domains)
    return search_query
