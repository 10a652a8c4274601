# httpmsgsig

Building blocks for HTTP Message Signatures:

- `httpmsgsig.sfv`: a strict parser and serializer for Structured Field Values
  (items, lists, dictionaries, inner lists and parameters), with size limits
  that guard against oversized input.
- `httpmsgsig.signing`: a registry of signature algorithms, shipping ECDSA
  over P-256 with SHA-256 (`ecdsa-p256-sha256`) and over P-384 with SHA-384
  (`ecdsa-p384-sha384`).

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to get pytest for the test suite.

## Parsing structured fields

```python
from httpmsgsig.sfv.lexer import default_limits
from httpmsgsig.sfv.parser import parse_dictionary

header = 'sig1=("@method" "@path");alg="ecdsa-p256-sha256";created=1618884473'
dictionary = parse_dictionary(header, default_limits())
```

`parse_dictionary` returns a plain `dict` that keeps keys in first-seen order;
for a repeated key the last value wins. `parse_list` returns a `list` of
members and `parse_item` a single `Item`. When no limits are passed,
`default_limits()` applies; `no_limits()` turns every size check off, so use it
only for input you trust. The `Parser` class (in `httpmsgsig.sfv.parser`)
exposes the same operations as methods, down to `parse_bare_item`,
`parse_parameters` and `parse_inner_list`.

Malformed input raises `ParseError` (a `ValueError`), which carries the
`offset`, a `message` and a `context` snippet of the input near the fault.

Values are built from the dataclasses in `httpmsgsig.sfv.values`: `Token` for
unquoted tokens (kept apart from quoted `str` values), `Parameter`, `Item` and
`InnerList`. Booleans, integers and byte sequences come back as `bool`, `int`
and `bytes`.

## Serializing

```python
from httpmsgsig.sfv.serialize import serialize_dictionary

assert serialize_dictionary(dictionary) == header
```

`serialize_item`, `serialize_inner_list`, `serialize_list`,
`serialize_parameters`, `serialize_bare_item` and `serialize_string` write the
canonical form of each structure; `is_valid_token` checks token syntax. An
unsupported value type raises `TypeError`.

## Signing and verifying

```python
from cryptography.hazmat.primitives.asymmetric import ec
from httpmsgsig.signing.algorithm import get_algorithm

signer = ec.generate_private_key(ec.SECP256R1())
algorithm = get_algorithm("ecdsa-p256-sha256")
signature = algorithm.sign(b"signature base", signer)
algorithm.verify(b"signature base", signature, signer.public_key())
```

Signatures are ASN.1 DER encoded and randomized, so signing the same base twice
gives different bytes. `verify` returns nothing for a valid signature and
raises `AlgorithmError` otherwise; empty inputs, keys of the wrong type and
keys on the wrong curve raise `AlgorithmError` too. Algorithm identifiers are
case-sensitive.

`supported_algorithms()` lists the registered identifiers in sorted order. Add
your own `Algorithm` subclass with `register_algorithm()` (a duplicate id is an
error) and remove it with `unregister_algorithm()`.

## What this package does not do

It does not build signature bases from HTTP messages, read or write
`Signature` and `Signature-Input` headers, or load keys from files. Only the
two ECDSA algorithms are provided; RSA, Ed25519 and HMAC are not included but
can be added through `register_algorithm()`. There is no command-line tool.