# minicfront

The front end of a compiler for MiniC. MiniC is a small C-like language with
`int` variables, functions without parameters, `return`, assignment, function
calls, and integer addition and subtraction. The package reads source text and
builds an abstract syntax tree.

## Modules

- `minicfront.tokens`: `TokenType` and the frozen `Token` dataclass. A token
  has the fields `kind`, `text`, `line` and `value`.
- `minicfront.lexer`: `Lexer`, `tokenize()` and `keyword_token()`. This is the
  hand-written lexer that the parser uses.
- `minicfront.ast_nodes`: `NodeKind`, `ASTNode` and the helpers that build
  nodes: `create_contain_node`, `create_func_call`,
  `create_var_decl_stmt_node`, `add_var_decl_node` and `create_func_def`.
- `minicfront.parser`: `Parser`, `parse()` and `ParseError`.
- `minicfront.flex_tokens`: `FlexTokenType` and `FlexToken`. These are the
  token kinds of the second scanner, numbered from 258 upwards, with 256 and
  257 reserved.
- `minicfront.flex_lexer`: `FlexScanner` and `scan()`. This is a second,
  regular-expression scanner with slightly different rules.
- `minicfront.executor`: `RecursiveDescentExecutor` and the command-line entry
  point `main()`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
minicfront program.c
```

This parses the file and prints the syntax tree, one node per line. Each level
of depth is indented by two spaces. A line holds the node kind, then, where
they are set, the type name, the name, the value and `(line n)`.

If the file cannot be opened, the command prints `Can't open file <name>` and
exits with status 1. If the parse finds syntax errors, it prints each error as
`Line(n): message` and exits with status 1.

```
minicfront --tokens program.c
```

With `-t` or `--tokens`, the command runs the second scanner instead and
prints one line per token: the line number, the kind and the text, separated
by tabs.

## Library use

Tokenising:

```python
from minicfront.lexer import tokenize

for token in tokenize("int main() { return 1 + 2; }"):
    print(token.kind.name, token.text, token.line, token.value)
```

The token list always ends with an `EOF` token. A character that no rule
accepts is printed as `Line(n): Invalid char c` and returned as an `ERR`
token. Integer literals are reduced to 32 unsigned bits. A `\r\n` pair, a lone
`\n` and a lone `\r` each count as one line ending.

Parsing:

```python
from minicfront.parser import parse, ParseError

try:
    root = parse("int a, b; int main() { a = 1; return a - 2; }")
except ParseError as exc:
    for message in exc.errors:
        print(message)
else:
    for child in root.sons:
        print(child.kind, child.name)
```

The root node has kind `NodeKind.COMPILE_UNIT`. It holds one `DECL_STMT` child
for each global declaration and one `FUNC_DEF` child for each function
definition. `ParseError` is raised after the whole text has been read. Its
`errors` list holds every message that was reported.

A call without arguments, such as `f()`, becomes a bare `FUNC_REAL_PARAMS`
node rather than a `FUNC_CALL` node.

Scanning with the second scanner:

```python
from minicfront.flex_lexer import scan

tokens = scan("int x;\nreturn x;")
```

This scanner counts only `\n` as a line ending. It returns characters it does
not accept as `UNDEF` tokens and prints `Line n: Invalid char c` for each.

Running a file through the executor from code:

```python
from minicfront.executor import RecursiveDescentExecutor

executor = RecursiveDescentExecutor("program.c")
root = executor.run()   # also stored in executor.ast_root
```

`run()` raises `OSError` if the file cannot be read and `ParseError` if the
text has syntax errors.

## Grammar

```
compileUnit : (T_INT T_ID idtail)* EOF
idtail      : varDeclList | '(' ')' block
varDeclList : ',' T_ID varDeclList | ';'
block       : '{' blockItem* '}'
blockItem   : T_INT T_ID varDeclList | statement
statement   : 'return' expr ';' | block | ';' | expr ('=' expr)? ';'
expr        : unaryExp (('+' | '-') unaryExp)*
unaryExp    : T_DIGIT | '(' expr ')' | T_ID ('(' (expr (',' expr)*)? ')')?
```

## What it does not do

The package covers only the front end: it lexes and parses. It does not check
semantics or build a symbol table. It does not produce intermediate code or
assembly. It does not accept comments in the source text.