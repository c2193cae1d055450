# rdpcalc

A small calculator built on a recursive-descent parser. It evaluates
statements that end in `;`. The language has variables, arithmetic, bitwise
operators, factorial and a few built-in functions.

## Installing

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Command line

```
rdpcalc
```

This evaluates a fixed sample program,
`let a=7;let b=3; let c = a*b; a+b*8;`, and prints one line per statement in
the form `<statement> EVAL=> <value>`. The value is printed with six decimal
places, for example `let a=7 EVAL=> 7.000000`. The command takes no input of
its own.

## Library use

```python
from rdpcalc.calculator import Calculator

calc = Calculator()
calc.statement("1+2*3;")          # 7.0
calc.statement("let a = 9;")      # 9.0
calc.statement("a * 2;")          # 18.0

for line in calc.calculation("let x=7; let y=3; x+y*8;"):
    print(line)
```

- `Calculator.statement(expr)` evaluates one statement and returns its value
  as a float. The statement must be ended by `;` or a newline.
- `Calculator.calculation(expr)` splits `expr` on `;`, evaluates each part in
  turn and returns a list of `"<statement> EVAL=> <value>"` strings.

A single `Calculator` keeps its variables from one statement to the next.

## Language

| Construct              | Meaning                                                   |
|------------------------|-----------------------------------------------------------|
| `let name = expr`      | declare a new variable (declaring it twice is an error)   |
| `name = expr`          | assign to a variable that is already declared             |
| `+ - * / %`            | arithmetic; `/` and `%` by zero are errors; `%` is `fmod` |
| `n!`                   | factorial; `0!` is `1`                                    |
| `& \| ^`               | bitwise and, or, xor on the integer parts of the operands |
| leading `~`            | bitwise not of the expression that follows                |
| `( )`, `{ }`           | grouping                                                  |
| `sqrt(x)`              | square root; a negative argument is an error              |
| `pow(x, n)`            | power; `n` must be a whole number that fits in 32 bits    |
| `sin(x)`, `cos(x)`     | trigonometric functions with the angle in degrees         |

Numbers may have a fraction and an exponent (`1.5`, `.5`, `2e3`). Names start
with a letter and go on with letters, digits or `_`.

Bad input raises `rdpcalc.tokens.CalculatorError` (a `RuntimeError`), with a
message that describes the problem, such as `divide by zero`,
`get: undefined variable x` or `Bad token--`.

## Building blocks

- `rdpcalc.tokens`: `Token`, `Kind`, `TokenStream` (with `get`, `putback`,
  `ignore`, `next_char`, `unread_char`), `CalculatorError` and `narrow_int`
- `rdpcalc.symbols`: `Variable` and `SymbolTable` (with `is_declared`,
  `get_value`, `set_value`, `define_name`; it also supports `in`, `len()` and
  iteration over its variables in declaration order)
- `rdpcalc.calculator`: `Calculator` and the `main` entry point

## What it does not do

There is no interactive prompt: the `rdpcalc` command only runs its sample
program. The words `quit` and `help` are read as tokens, but the calculator
does not act on them; in an expression they are an error.