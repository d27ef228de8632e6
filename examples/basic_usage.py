"""Example building the same filter with both construction styles."""

from __future__ import annotations

from typed_filter import FilterConfig, Integer, PropertySet, Text, integer, string


# Step 1: Declare the properties filters are written against
class ExampleProperties(PropertySet):
    """Example schema with one integer and one text property."""

    id = Integer("id")
    name = Text("name")


def main():
    # Step 2: Raw values are converted by the integer and text capabilities
    f = ExampleProperties.filter(lambda s, p: s.eq(1, p.id) & s.eq(p.name, "test"))
    print(repr(f))
    print(f.render())

    # Step 3: Values can also be wrapped explicitly
    f2 = ExampleProperties.filter(lambda s, p: s.eq(integer(1), p.id) & s.eq(p.name, string("test")))
    print(repr(f2))
    print(f2.render())

    # Step 4: Unified capabilities give the same output with a single eq2/and2
    g = ExampleProperties.filter2(lambda s, p: s.and2(s.eq2(1, p.id), s.eq2(p.name, "test")))
    print(repr(g))
    print(g.render())

    # Step 5: Quote escaping is opt-in
    h = ExampleProperties.filter(
        lambda s, p: s.eq(p.name, "O'Brien"), config=FilterConfig(escape_quotes=True)
    )
    print(h.render())


if __name__ == "__main__":
    main()
