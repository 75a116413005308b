"""Filtered, ordered key lists for displaying a locale."""


def matches(key: str, value: str, query: str) -> bool:
    """Case-insensitive substring match against the key or its value."""
    q = query.casefold()
    return q in key.casefold() or q in value.casefold()


def display_order(item) -> tuple:
    """Sort key: untranslated ("" value) first, then by key."""
    key, value = item
    return (value != "", key)


def visible_keys(store, locale: str, query: str = "") -> list:
    """Return the keys of ``locale`` to display for ``query``.

    Unknown locales yield an empty list.  Never mutates the store.
    """
    data = store.translations.get(locale)
    if data is None:
        return []
    items = list(data.items())
    if query:
        items = [(k, v) for k, v in items if matches(k, v, query)]
    items.sort(key=display_order)
    return [k for k, _ in items]
