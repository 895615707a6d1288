# tokscope

tokscope splits source text into simple tokens and tracks bracket scopes
over them. It also has two small data structures: a prefix trie and a
fixed-size two-dimensional matrix.

## Installing

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Tokens

`tokscope.tokens` defines the following names.

- `TokenType` is an enum with the members `COMMENT`, `IDENTIFIER`, `KEYWORD`,
  `PUNCTUATION`, `NUMBER`, `STRING` and `NOTHING`. `str()` of a member gives
  its name.
- `Token` is a frozen dataclass with the fields `type`, `value` and `pos`.
  `pos` is the offset in the code just past the token.
  `str(token)` gives `Token{type=..., value="...", i=...}`.
- `Token.highlighted(code)` returns `code` with the token's value inserted in
  green at `pos`. When `pos` lies outside the code, it returns `code` unchanged.
- `expect(code, token, type, message, where="")` returns `token` when it is of
  the given type. Otherwise it raises `UnexpectedTokenError`. The error holds
  `message`, `token`, `expected`, `got`, `where` and `context`, where `context`
  is the highlighted code. Its `details()` method gives a multi-line
  description of the mismatch.

The module also exposes `BUILT_IN_TYPES`, a frozen set of reserved words, and
`USER_DEFINED_TYPES`, a set that starts out empty and that callers fill in.

## Tokenizing

`tokscope.tokenizer` reads one token at a time from a position in the text:

```python
from tokscope.tokenizer import next_token, peek_token, tokenize

code = "class Car{ int miles }"
token, pos = next_token(code, 0)
# token.type is TokenType.KEYWORD, token.value is "class", pos is 5

upcoming = peek_token(code, pos)   # IDENTIFIER "Car"; pos is unchanged
tokens = tokenize("int age = 90")  # every token up to the end of the text
```

Whitespace is skipped before each token. The tokenizer recognises these
kinds of text:

- A comment starts with `//` and runs to the end of the line. Its value
  includes the `//`.
- A string is quoted with `"`, `'` or `` ` ``. Its value does not include the
  quotes, and a string that is never closed runs to the end of the text.
- An identifier is made of letters, digits and `_`, and does not start with
  a digit.
- A keyword is an identifier from the fixed set `KEYWORDS`, such as `if`,
  `return`, `class` and `function`.
- A number starts with a digit and continues with digits and dots.
- Punctuation is any run of punctuation characters.

At the end of the text, `next_token` returns a `NOTHING` token. `tokenize`
leaves those tokens out of its result. A character that cannot start any
token raises `TokenizeError`, which carries `char` and `pos`.

## Scopes

`tokscope.scope` works with the brackets `()`, `[]` and `{}`:

- `find_scope_end(tokens, start=0, stack=())` scans a token sequence from
  `start`, with the brackets in `stack` already open. It returns the index of
  the token that empties the bracket stack. Only single-character punctuation
  tokens count.
- `tokens_until_unscoped_comma(code, pos)` reads tokens from the text up to
  the first comma that is outside every bracket. The comma is consumed but is
  not returned. The function returns the tokens and the position to resume
  from.

Unbalanced or mismatched brackets, and a scope that never closes, raise
`ScopeError`.

## Trie

`tokscope.trie.Trie` stores words over an alphabet of 52 characters that
starts at `a`. A character outside that range raises `ValueError`.

```python
from tokscope.trie import Trie

trie = Trie(["car"])
trie.insert("cat")
trie.contains("ca")           # True: "ca" is a prefix of a stored word
trie.is_word("ca")            # False
trie.split_longest("carcat")  # ["car", "cat"]
```

`split_longest` cuts off a word only where a stored word ends and no longer
word continues it. Trailing letters that do not complete a word are dropped.
When the letters leave the trie, it raises `WordNotFoundError`.

## Matrix

```python
from tokscope.matrix import Matrix

m = Matrix(2, 2, [[1, 2], [3, 4]])
m[1, 0]          # 2, indexed as (x, y)
m[0, 1] = 9
```

The constructor raises `ValueError` when the rows do not match the given
width and height, or when a dimension is negative. Indexing outside the
matrix raises `IndexError`. Two matrices are equal when they have the same
dimensions and the same cells.

## What it does not do

tokscope stops at tokens and bracket scopes. It does not parse declarations
or other statements into a syntax tree, and it generates no code. It has no
command-line program: use it as a library.