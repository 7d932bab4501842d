"""Example 01: Describing a Form Document

This example builds a schema for a small signup form and walks it the way a
form layer does: finding the node for each field, rendering values as text
and parsing the text a user typed back into values.

Topics Covered:
--------------
- Building schemas with Scalar, Mapping and List
- Default values
- Traversing mappings and lists
- Serializing and deserializing scalar fields
- Handling invalid input without exceptions
"""

import valueschema as vs

# =============================================================================
# Schema
# =============================================================================

signup = vs.Mapping(
    {"label": "Signup"},
    {
        "name": vs.Scalar(label="Full name"),
        "age": vs.Scalar(type="number", default_value=18),
        "emails": vs.List(vs.Scalar(label="Email")),
    },
)


def render(schema: vs.Node, value, path: str = "") -> None:
    """Print every scalar field of ``value`` as the text a form would show."""
    if isinstance(schema, vs.CompositeNode):
        for key in schema.keys(value):
            child_value = value.get(key) if isinstance(value, dict) else value[key]
            render(schema.get(key), child_value, f"{path}/{key}")
    else:
        print(f"  {path or '/'}: {schema.serialize(value)!r}")


def main():
    print("=" * 80)
    print("Signup form schema")
    print("=" * 80)
    print(signup)

    # -------------------------------------------------------------------------
    # 1. Traversal
    # -------------------------------------------------------------------------
    print("\n1. Fields:")
    print("-" * 80)
    for key in signup.keys():
        print(f"  {key}: {signup.get(key).kind}")

    emails = signup.get("emails")
    print(f"  Any index of 'emails' is addressable: {emails.has(41)}")

    # -------------------------------------------------------------------------
    # 2. Defaults
    # -------------------------------------------------------------------------
    print("\n2. Defaults:")
    print("-" * 80)
    print(f"  age defaults to {signup.get('age').default_value}")

    # -------------------------------------------------------------------------
    # 3. Rendering a document as text
    # -------------------------------------------------------------------------
    print("\n3. Rendering:")
    print("-" * 80)
    document = {"name": "Ann", "age": None, "emails": ["ann@example.com"]}
    render(signup, document)

    # -------------------------------------------------------------------------
    # 4. Parsing user input
    # -------------------------------------------------------------------------
    print("\n4. Parsing:")
    print("-" * 80)
    age = signup.get("age")
    for text in ["42", "", "forty-two"]:
        result = age.deserialize(text)
        if vs.is_invalid(result):
            print(f"  {text!r} -> error: {result}")
        else:
            print(f"  {text!r} -> {result!r}")


if __name__ == "__main__":
    main()
