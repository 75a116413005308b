"""Key synchronization across locale dictionaries."""


def synchronize_keys(translations: dict) -> dict:
    """Give every locale the union of all keys, filling gaps with "".

    Mutates and returns ``translations`` ({locale: {key: value}}).  Existing
    values are never touched, so running it twice changes nothing.
    """
    all_keys = {}
    for data in translations.values():
        for key in data:
            all_keys.setdefault(key, None)

    for data in translations.values():
        for key in all_keys:
            if key not in data:
                data[key] = ""
    return translations


def missing_keys(translations: dict) -> dict:
    """Return {locale: sorted keys absent from that locale}, empty lists dropped."""
    union = set()
    for data in translations.values():
        union.update(data)
    result = {}
    for locale, data in translations.items():
        gaps = sorted(union - set(data))
        if gaps:
            result[locale] = gaps
    return result
