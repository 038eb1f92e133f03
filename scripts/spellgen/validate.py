def validate_spells(spells):
    warnings = []

    # helpers
    def find_dupes(names):
        seen = set()
        dupes = set()
        for x in names:
            if x in seen:
                dupes.add(x)
            seen.add(x)
        return sorted(d for d in dupes if d)

    names = [(sp.get("name") or "").strip().lower() for sp in spells]

    blank = [i for i, name in enumerate(names, start=1) if not name]
    if blank:
        warnings.append(f"Spells without a name at rows: {blank[:10]}" + (" ..." if len(blank) > 10 else ""))

    dup_names = find_dupes(names)
    if dup_names:
        warnings.append(f"Duplicate spell names: {dup_names[:10]}" + (" ..." if len(dup_names) > 10 else ""))

    for i, sp in enumerate(spells, start=1):
        level = (sp.get("level") or "").strip()
        if not level.isdigit():
            warnings.append(f"Spell {sp.get('name') or '#' + str(i)} has non-numeric level={level!r}")

    return warnings
