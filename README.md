# serverkit

Small building blocks for writing API servers:

- **Field selectors** (`serverkit.fields.selector`, `serverkit.fields.fieldset`,
  `serverkit.fields.requirements`): parse, match and transform selectors such
  as `status=active,kind!=system`.
- **Error codes** (`serverkit.errno`): `Errno` and `Err`, exceptions carrying a
  business error code and a user-safe message.
- **Passwords** (`serverkit.auth`): bcrypt hashing and comparison.
- **Tokens** (`serverkit.token`): sign and verify HS256 JWT tokens.
- **Version info** (`serverkit.version`, `serverkit.verflag`): build
  information and a `--version` flag for `argparse`.
- **Request options** (`serverkit.meta`): `ListOptions`, `GetOptions`,
  `CreateOptions`, `UpdateOptions`, `DeleteOptions` and `ListMeta`, with
  `to_dict()` giving their JSON form.
- **Utilities**: home directory lookup (`serverkit.homedir.home_dir`), short
  year-prefixed ids (`serverkit.shortid.gen_short_id`) and string helpers
  (`serverkit.stringutil`).

Python 3.10 or later is required. Install with `pip install .`, or
`pip install .[test]` to run the tests with pytest.

## Field selectors

```python
from serverkit.fields.selector import parse_selector, escape_value
from serverkit.fields.fieldset import FieldSet

selector = parse_selector("name=web,status!=deleted")
print(selector.matches(FieldSet({"name": "web", "status": "running"})))  # True
print(selector.requires_exact_match("name"))  # web
print(selector.requires_exact_match("status"))  # None
print(str(selector))  # name=web,status!=deleted

# Values holding "\", "," or "=" must be escaped.
print(escape_value("a=b,c"))  # a\=b\,c
```

Terms are sorted when parsed, so `"x=a,a=x"` and `"a=x,x=a"` give the same
selector. `==` is accepted as a synonym for `=`. `everything()` matches all
fields and `nothing()` matches none; `selector_from_set`,
`one_term_equal_selector`, `one_term_not_equal_selector` and `and_selectors`
build selectors directly. `requirements()` lists a selector's terms as
`Requirement(operator, field, value)` records.

A selector can be rewritten while it is parsed. A transform that returns an
empty field and value drops the term:

```python
from serverkit.fields.selector import parse_and_transform_selector

def rename(field, value):
    if field == "id":
        return "", ""
    return field, value

print(str(parse_and_transform_selector("id=1,name=web", rename)))  # name=web
```

Malformed selectors raise `SelectorParseError`; bad escapes raise
`InvalidEscapeSequence` or `UnescapedRune`. All three are `ValueError`s.

`FieldSet` is a read-only mapping; its `get` returns an empty string for a
missing field, and `str()` gives the fields sorted as `key=value,...`.

## Error codes

```python
from serverkit.errno import Errno, new

not_found = Errno(code=110001, message="User was not found.")
err = new(not_found, None).add("name=alice")
print(err.code, err.message)  # 110001 User was not found. name=alice
```

`Err.addf` appends a `%`-formatted message in the same way.

## Passwords

```python
from serverkit.auth import encrypt, compare, PasswordMismatchError

password = "password"
hashed = encrypt(password)
compare(hashed, password)  # returns quietly on a match

try:
    compare(hashed, "secret")
except PasswordMismatchError:
    print("wrong password")
```

## Tokens

```python
from serverkit import token

token.init("secret", "identity")
signed = token.sign("alice")
print(token.parse(signed, "secret"))  # alice
```

Only the first call to `init` takes effect. Tokens are valid for 100000 hours.
`parse_request` takes the value of an `Authorization` header such as
`"Bearer token"` and raises `MissingHeaderError` when it is empty. Invalid
tokens raise the errors of `jwt` (PyJWT).

## Version information

```python
import argparse
from serverkit import version, verflag

parser = argparse.ArgumentParser()
verflag.add_flags(parser)
args = parser.parse_args()
verflag.print_and_exit_if_requested(args.version)

print(version.get().to_json())
```

With these lines in your own program, `--version` prints a table of build
details and `--version=raw` prints the raw `Info` record; both then exit with
status 0. Boolean words such as `true`, `false`, `1` and `0` are also accepted.

## String helpers

```python
from serverkit.stringutil import diff, reverse, camel_case_to_underscore, decode_base64

print(diff(["foo", "bar", "hello"], ["foo", "bar", "world"]))  # ['hello']
print(reverse("hello"))  # olleh
print(camel_case_to_underscore("MyFieldName"))  # my_field_name
print(decode_base64("aGVsbG8="))  # b'hello'
```

Also available: `unique`, `underscore_to_camel_case`, `find_string` and
`string_in`.

## What it does not do

serverkit is a library only. It provides no command of its own, no HTTP
server and no binding to a web framework: `parse_request` works on a header
string you pass in, and `to_dict()` and `Errno`/`Err` give you data to put in
a response yourself.