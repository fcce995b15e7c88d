# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies:

- `dsakit.stack`: a stack, bounded by a capacity or unbounded
- `dsakit.queues`: linear, circular, linked and two-stack queues
- `dsakit.linked_list`: a singly linked list with positional inserts and
  deletes, plus prime, Armstrong and palindrome filters
- `dsakit.bst`: a binary search tree with traversals and counting helpers
- `dsakit.expressions`: infix to postfix conversion and postfix evaluation
- `dsakit.recursion`: counting sequences and binary/decimal conversion
- `dsakit.cli`: the `dsakit` command with interactive menus

Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Stack

```python
from dsakit.stack import Stack

stack = Stack(10)          # Stack() or Stack(None) is unbounded
stack.push(1)
stack.push(2)
stack.peek()               # 2
list(stack)                # [2, 1], top first
list(stack.bottom_up())    # [1, 2]
stack.pop()                # 2
len(stack)                 # 1
```

Pushing onto a full stack raises `StackFullError`; popping or peeking an
empty one raises `StackEmptyError`. A capacity of zero or less raises
`ValueError`.

## Queues

```python
from dsakit.queues import CircularQueue

queue = CircularQueue(20)
queue.enqueue(5)
queue.enqueue(7)
queue.dequeue()    # 5
queue.peek()       # 7
list(queue)        # [7]
```

- `LinearQueue(capacity=20)`: an array queue that does not reuse freed slots.
  Once `capacity` values have been enqueued it reports full until it is
  drained completely.
- `CircularQueue(capacity=20)`: a ring buffer holding up to `capacity` values.
- `LinkedQueue()`: unbounded.
- `StackQueue(capacity=5)`: a bounded queue built from two stacks; it has
  `enqueue`, `dequeue`, `is_empty` and `is_full` but no `peek`.

All queues support `len()` and iterate from front to back. Adding to a full
queue raises `QueueFullError`; taking from an empty one raises
`QueueEmptyError`.

## Linked list

```python
from dsakit.linked_list import LinkedList, is_prime, is_armstrong, is_palindrome

items = LinkedList([7, 10, 121, 153])
items.insert_in_ascending_order(9)
str(items)           # "7 -> 9 -> 10 -> 121 -> 153 -> NULL"
items.primes()       # [7]
items.armstrongs()   # [7, 9, 153]
items.palindromes()  # [7, 9, 121]
items.alternate()    # [7, 10, 153]
```

Inserts: `insert_at_beginning`, `insert_at_end`, `insert_after_first`,
`insert_before_last`, `insert_in_ascending_order`.

Deletes: `delete_first`, `delete_last`, `delete_after_first` and
`delete_before_last` return the removed value; `delete_alternate` removes the
second, fourth, ... values and returns them; `delete_value(value)` removes the
first occurrence.

Removing from an empty list raises `ListEmptyError`. `delete_after_first` and
`delete_before_last` on a one-element list raise `IndexError`, and
`delete_value` raises `ValueError` when the value is absent. Negative numbers
are neither Armstrong numbers nor palindromes.

## Binary search tree

```python
from dsakit.bst import BinarySearchTree, Traversal

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.inorder()                      # [20, 30, 40, 50, 70]
tree.traverse(Traversal.PREORDER)   # [50, 30, 20, 40, 70]
tree.traverse("postorder")          # [20, 40, 30, 70, 50]
tree.count_leaves()                 # 3
tree.highest(), tree.least()        # (70, 20)
tree.height(), tree.depth()         # (3, 2)
tree.find_parent(40)                # 30
tree.find_parent(50)                # None, the root has no parent
40 in tree                          # True
tree.delete(30)
```

Counting helpers: `count_leaves`, `count_only_left_child`,
`count_only_right_child`, `count_one_child`, `count_both_children`,
`count_with_parent`, `count_siblings`, `count_left_side` and
`count_right_side`. `height()` counts levels (0 for an empty tree) and
`depth()` counts edges on the longest path (-1 for an empty tree).

Inserting a value already present raises `DuplicateValueError`. `highest`,
`least`, `find_parent`, `count_left_side`, `count_right_side` and `delete` on
an empty tree raise `EmptyTreeError`; `find_parent` and `delete` raise
`KeyError` for a value that is not in the tree. When a node with a right
subtree is deleted, that subtree takes its place and the node's left subtree
is hung under the smallest node of the right subtree.

## Expressions

```python
from dsakit.expressions import infix_to_postfix, evaluate_postfix, operand_names

infix_to_postfix("a+b*c")                             # "abc*+"
operand_names("abc*+")                                # ["a", "b", "c"]
evaluate_postfix("abc*+", {"a": 1, "b": 2, "c": 3})   # 7
```

Operands are single letters. `infix_to_postfix` handles `+ - * /` and
parentheses and skips any other character. `evaluate_postfix` also accepts
`^`, works on integers with division truncating toward zero, ignores
whitespace, and raises `ExpressionError` for unknown characters, missing
operand values, missing operands, division by zero or an expression that does
not reduce to one value.

## Recursion utilities

```python
from dsakit.recursion import count_down, count_up, decimal_to_binary, binary_to_decimal

count_down(3)             # [3, 2, 1]
count_up(3)               # [1, 2, 3]
decimal_to_binary(10)     # "1010"
binary_to_decimal(1010)   # 10
binary_to_decimal("110")  # 6
```

Negative inputs and digits other than 0 and 1 raise `ValueError`.

## Command line

The `dsakit` command takes a subcommand:

```
dsakit bst                     # interactive binary search tree menu
dsakit list                    # interactive linked list menu
dsakit stack --capacity 10     # interactive bounded stack menu (default 10)
dsakit queue                   # interactive linked queue menu
dsakit postfix "abc*+" a=1 b=2 c=3
dsakit to-binary 10
dsakit to-decimal 1010
```

The menus read numbered choices from standard input; the last entry, or end
of input, exits. `postfix` prompts for any operand whose value was not given
as `NAME=VALUE`. The command exits with status 1 on an invalid expression or
number.

## Limitations

Everything is held in memory: the structures and the interactive menus keep
nothing between runs and there is no saving or loading of data.