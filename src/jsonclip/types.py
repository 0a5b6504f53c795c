"""Type aliases for parsed JSON documents."""

# Recursive definition mirroring the decoder's output types
JsonValue = (
    str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
Position = int
