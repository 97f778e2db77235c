# hoconlite

hoconlite builds HOCON-style configuration trees in Python and resolves
them. It merges objects, applies `+=` appends, concatenates values and
expands `${path}` and `${?path}` substitutions. The result is an
`hoconlite.objects.Object`, which is a `dict` subclass, holding further
objects, lists and scalars (`None`, `bool`, `str`, `int`, `float`).

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install hoconlite
```

## Building a configuration

`hoconlite.config.Config` collects key/value fields in order. String keys
are path expressions, so `"server.port"` creates the object `server` with
the field `port` in it. When a key is set more than once, later values
override earlier ones and objects are merged field by field. Mappings
become objects and lists or tuples become arrays.

```python
from hoconlite.config import Config

config = Config()
config.add_kv("server.host", "localhost")
config.add_kv("server.port", 8080)
config.add_kvs([("name", "demo"), ("debug", False)])

value = config.resolve()
# {"debug": False, "name": "demo", "server": {"host": "localhost", "port": 8080}}
```

`add_kv`, `add_kvs` and `add_object` return the configuration, so calls can
be chained. `add_object` takes a mapping or a sequence of pairs.

A key given as a `hoconlite.key.Key` or as a sequence of strings is taken
segment by segment and is never split on dots. `Config.from_mapping` builds
a configuration in which every key of the mapping is literal, so `"a.b"`
stays a single key.

Keys of resolved objects come out in sorted order.

## Pending values

Values that need resolution are written with the classes of
`hoconlite.merge`:

- `hoconlite.merge.substitution.Substitution(path, optional=False)` refers
  to another value; `path` is a `hoconlite.merge.path.RefPath`, built for
  example with `RefPath.from_parts(["base", "host"])`.
- `hoconlite.merge.value.Concat(items)` concatenates its items once they
  are resolved: strings, numbers and booleans join into a string, arrays
  join into one array, and objects are merged.
- `hoconlite.merge.value.AddAssign(value)` appends `value` to the array
  already set at that key, or starts a one-element array.

```python
from hoconlite.config import Config
from hoconlite.merge.path import RefPath
from hoconlite.merge.substitution import Substitution
from hoconlite.merge.value import AddAssign, Concat

config = Config()
config.add_kv("base.host", "localhost")
config.add_kv("url", Substitution(RefPath.from_parts(["base", "host"])))
config.add_kv("name", "world")
config.add_kv("greeting", Concat(["hello ", Substitution(RefPath("name"))]))
config.add_kv("items", [1, 2])
config.add_kv("items", AddAssign(3))

value = config.resolve()
# value["url"] == "localhost"
# value["greeting"] == "hello world"
# value["items"] == [1, 2, 3]
```

When the path of a required substitution is missing from the
configuration, its dotted form is looked up as an environment variable;
if that is missing too, `SubstitutionNotFoundError` is raised. An optional
substitution (`optional=True`) with no target resolves to `None`.
Substitutions that refer to each other in a cycle raise
`CycleSubstitutionError`.

The lower-level pieces are usable on their own: `MergeObject` in
`hoconlite.merge.object` holds the merge tree, and `resolve` and
`to_plain` in `hoconlite.merge.resolver` resolve it and convert it to
plain data.

## Errors

Every error the package raises derives from `hoconlite.errors.HoconError`.
The ones raised while building and resolving include
`InvalidPathExpressionError` (an empty path),
`ConcatenationDifferentTypeError` (for example concatenating an array with
a string), `SubstitutionNotFoundError`, `CycleSubstitutionError`,
`InvalidConversionError` and `ResolveNotCompleteError`.

## Options

`hoconlite.options.ConfigOptions` holds loading settings: a maximum
include depth (50 by default, from 0 to 255), whether the system
environment is used, override behaviour through `OverrideOptions`, and a
list of classpath entries. A `Config` keeps the options it is given, but
`resolve()` does not consult them; environment variables are always
looked up for missing required substitutions.

## What it does not do

hoconlite works on trees built in Python. It does not parse HOCON, JSON or
properties text, does not load files or URLs, does not process `include`
directives, and does not write a configuration back out as text.