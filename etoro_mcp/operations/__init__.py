"""Call composition over the gateway client.

One async function per upstream operation. Multi-step calls
(search-then-enrich, username-then-feed, portfolio-lookup-then-close)
are sequential and non-transactional.
"""
