# structlabs

Four small console programs about basic data structures, and the library
code behind them. The programs talk to the user in Russian and read their
answers line by line from standard input.

## Commands

- **structlabs-bignum** reads a real number such as `-12.5E+3` and then an
  integer. The real number may have a mantissa of up to 40 digits and an
  exponent of up to 5 digits. The integer may have up to 30 digits. The
  program prints their product, rounded to 30 significant digits, as
  `±0.<digits>E<order>`. On bad input it prints a message and exits with a
  non-zero status.
- **structlabs-theatre** manages a table of theatre repertoires through a
  menu. It can load a table from a text file and save it back. It can add a
  theatre, or delete the first theatre with a given name. It prints the
  table, its key table (row index and lowest ticket price), the sorted keys,
  the table sorted by lowest price, and the table in the order of the sorted
  keys. It also lists ballets suitable for a given age that are shorter than
  a given length. Finally, it times quicksort against insertion sort on the
  table rows and on the keys.
- **structlabs-sparse** multiplies a matrix by a column vector. You can type
  the matrix and vector in by coordinates or fill them at random. The
  matrix is printed in full or in CSR form, and the vector in full or
  sparse form. It multiplies either way, and prints a table of product
  times and storage sizes for several matrix sizes and fill percentages.
- **structlabs-stack** works with a stack of up to 20 integers kept in an
  array and another kept on a linked list. It pushes and pops single values
  or whole sequences, shows both stacks, and lists the addresses of the
  popped list nodes. It prints the decreasing runs of the pushed sequence
  and times series search, push and pop on both kinds of stack.

In the timing tables the times are measured in microseconds. The memory
figures are computed from fixed per-element byte sizes.

## Theatre table file

Each record is a run of lines in this order: theatre name, performance
name, lowest price and highest price. Next comes the performance type:
1 play, 2 drama, 3 comedy, 4 fairy tale or 5 musical. A fairy tale adds
one age-limit line: 1 for 3+, 2 for 10+, 3 for 16+. A musical adds five
lines: composer, country, musical type (1 ballet, 2 opera, 3 musical),
age limit and duration in minutes. Names are at most 30 characters.

## Use as a library

```python
from structlabs.bignum import parse_bignum, multiply

product = multiply(parse_bignum("1.5E2"), parse_bignum("4"))
print(product.normalized().format())   # 0.6E3
```

`read_bignum` and `read_bigint` read a number from one input line. They
raise subclasses of `BigNumError` (`EmptyInputError`, `NumberLengthError`,
`OrderLengthError` or `InvalidSymbolError`) on bad input.

```python
from structlabs.array_stack import ArrayStack
from structlabs.stack_series import decreasing_series, format_series

stack = ArrayStack(20)
for value in (1, 5, 3, 2):
    stack.push(value)
print(decreasing_series(stack))   # [(2, 3, 5)]
```

`ArrayStack` and `structlabs.list_stack.ListStack` raise
`StackOverflowError` when full and `StackEmptyError` when empty.
`ListStack.freed_addresses()` returns the addresses of popped nodes, most
recent first.

```python
from structlabs.matrix import DenseMatrix
from structlabs.vector import SparseVector
from structlabs.mv_operations import matrix_mul_vector, sparse_matrix_mul_vector

matrix = DenseMatrix.from_rows([[1, 0], [0, 2]])
vector = SparseVector(2, values=[3], indices=[1])
print(sparse_matrix_mul_vector(matrix.to_sparse(), vector).to_dense())   # [0, 6]
```

The theatre table is `structlabs.theatre_table.TheatreTable`.
`TheatreTable.load` reads a table from an open text stream and `save`
writes it back. `add`, `delete_by_name`, `keys` and `find_ballets` work on
the rows, and the `format_*` methods render the printed tables. The module
also provides `insertion_sort`, `quick_sort`, `time_sort_table` and
`time_sort_keys`.

## Tests

```
pip install .[test]
pytest
```