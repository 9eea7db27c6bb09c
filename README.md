# zettelstore

Building blocks for a zettel store: a place to keep small notes ("zettel"),
each with a 14 digit identifier, metadata and content.

## What is in the package

- `zettelstore.zettel`: identifiers (`ZettelID`, `parse_zettel_id`,
  `new_zettel_id`, `InvalidZettelIDError`) and the `Zettel` data object.
- `zettelstore.meta`: the `Meta` container, the header parser `parse_meta`,
  `add_to_meta`, and helpers such as `key_is_valid`, `key_type`,
  `bool_value` and `list_from_value`.
- `zettelstore.reference`, `zettelstore.attributes`, `zettelstore.nodes`:
  the node types of a parsed zettel's syntax tree (`ParsedZettel`,
  `ParaNode`, `LinkNode`, `ImageNode`, ...), `Reference`/`parse_reference`
  and `Attributes`.
- `zettelstore.visitor` and `zettelstore.collect`: `Visitor`,
  `TopDownTraverser`, and `references(zettel)`, which returns the link and
  image references of a parsed zettel.
- `zettelstore.version`, `zettelstore.startup`, `zettelstore.runtime`,
  `zettelstore.metaconfig`: version description, settings fixed at start
  (`StartupConfig.from_meta`), values of a configuration zettel
  (`RuntimeConfig`) and defaults added to metadata (`add_default_values`,
  `get_syntax`, `get_lang`, `get_visibility`, `get_user_role`).
- `zettelstore.credentials`: `hash_credential` and
  `compare_hash_and_credential`, bcrypt hashes bound to zettel id and ident.
- `zettelstore.policy`: `AllPolicy`, `DefaultPolicy`, `OwnerPolicy` and
  `new_policy(name, owner, readonly)`.
- `zettelstore.authtoken`: `get_token` and `check_token` for HS512 signed
  tokens; problems are raised as `TokenError`, whose `reason` tells why.
- `zettelstore.commands` and `zettelstore.cli`: the command registry and the
  command line.

## Installation

```
pip install .
```

## Parsing metadata

`parse_meta` reads a metadata header and returns the metadata together with
the text that follows it.

```python
from zettelstore.meta import parse_meta
from zettelstore.zettel import parse_zettel_id

zid = parse_zettel_id("20200310195100")
meta, rest = parse_meta(zid, "title: My first note\ntags: #intro #demo\n\nBody text")
print(meta.get("title"))        # "My first note"
print(meta.get_list("tags"))    # ["#demo", "#intro"]
print(rest)                     # "Body text"
```

Header keys are converted to lower case, and values are stored according to
the key's type: tags keep only words starting with `#` and are sorted, word
values are lower-cased, string values are appended to earlier ones. The key
`id` always reflects the zettel identifier and cannot be set. `Meta.get`
returns `None` for a missing key. Metadata can be frozen with
`Meta.freeze()`; changing it afterwards raises `FrozenMetaError`.

## Credentials

```python
from zettelstore.credentials import compare_hash_and_credential, hash_credential

password = "password"
hashed = hash_credential(zid, "alice", password)
compare_hash_and_credential(hashed, zid, "alice", password)   # True
```

## Command line

```
zettelstore help
zettelstore version
zettelstore config [-c FILE] [-p PORT] [-d DIR] [-r] [-v]
zettelstore password <ident> <zettel-id>
```

- `help` lists the available commands; it also runs when no command is given.
- `version` prints program, build, Python version, host, OS and architecture.
- `config` reads the configuration file (`.zscfg` in the current directory,
  or the file given with `-c`), applies the flags and prints the resulting
  settings: read-only mode, listen address, URL prefix and, when the
  configuration names an `owner` zettel id, the authentication settings.
- `password` asks for a password twice and prints the ident and the hashed
  credential to put into a user zettel.

Unknown commands and unparsable flags end with exit code 1.

## What this package does not do

There is no web server and no `run` command, no storage of zettel on disk
or in memory, and no parser or renderer that turns zettel content into a
syntax tree or into HTML or other formats. The syntax tree types, policies
and tokens are provided for such parts to build on.

## Running the tests

```
pip install .[test]
pytest
```