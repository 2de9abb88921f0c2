from collection_literals.configparser import CollectionLiteralsConfigParser, EnumStr


def add_basic_configvars(config: CollectionLiteralsConfigParser) -> None:
    config.add(
        "check_element_types",
        "What to do when the elements of a set, or the keys or values of a "
        "map, do not share a single type. 'raise' raises a TypeError, 'warn' "
        "emits an ElementTypeWarning and 'off' skips the check.",
        EnumStr("raise", ["warn", "off"]),
    )

    config.add(
        "on_duplicate",
        "What to do when a set element or map key occurs more than once. "
        "Duplicates always collapse (the last map value wins); 'warn' "
        "additionally emits a DuplicateElementWarning.",
        EnumStr("ignore", ["warn"]),
    )


config = CollectionLiteralsConfigParser()
add_basic_configvars(config)
