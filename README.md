# dslabs

Classic data structures written as plain Python, together with interactive
console menus for trying them out. The menus talk to the user in Spanish.

## Installation

```
pip install .
```

## The structures

| Module | Contents |
| --- | --- |
| `dslabs.linkedlist` | `DoublyLinkedList` |
| `dslabs.stacks` | `LinkedStack`, `BoundedStack`, `StackOverflowError`, `StackUnderflowError`, `balanced_parentheses`, `is_palindrome`, `precedence`, `infix_to_postfix`, `infix_to_prefix` |
| `dslabs.fifo` | `BoundedQueue`, `QueueFullError`, `QueueEmptyError`, `evacuation_order`, `take_turns` |
| `dslabs.tree` | `TreeNode`, `BinaryTree`, `build_tree` |
| `dslabs.bst` | `BinarySearchTree`, `DuplicateKeyError` |
| `dslabs.avl` | `AVLNode`, `AVLTree` |

### Doubly linked list

`DoublyLinkedList(values)` can be walked forwards (`iter`) and backwards
(`reversed`). It inserts at either end or before/after the first node holding
a given value, counts occurrences, reverses in place, moves the first smallest
value to the front (`move_min_to_front`) or the first largest to the back
(`move_max_to_back`), collapses runs of equal neighbours
(`remove_adjacent_duplicates`) and removes every node holding a value
(`remove_all`). `render()` and `render_backward()` give text such as
`1 -> 2 -> NULL`.

Missing targets raise `ValueError`; removing from an empty list, or before the
first / after the last node, raises `IndexError`.

### Stacks and expressions

`LinkedStack` is unbounded; `BoundedStack(capacity=100)` raises
`StackOverflowError` when full. Both raise `StackUnderflowError` (an
`IndexError`) when popped or peeked while empty, iterate from the top down and
compare equal when they hold the same values in the same order.

```python
from dslabs.stacks import balanced_parentheses, infix_to_postfix, infix_to_prefix

infix_to_postfix("a+b*c")           # 'abc*+'
infix_to_prefix("a+b*c")            # '+a*bc'
balanced_parentheses("(a+(b*c))")   # True
```

Operands are ASCII letters and digits; `+ -` bind weakest, then `* /`, then `^`.

### Queue

`BoundedQueue(capacity=10)` behaves like an array-backed queue: slots freed at
the front are only reused once the queue has been emptied, so it can report
itself full (`QueueFullError`) while holding fewer than `capacity` values.
`reverse()` reverses it through a stack and `remove_all(value)` drops every
matching value; both raise `QueueEmptyError` on an empty queue.

`evacuation_order()` empties a priority, a regular and a crew queue in that
order. `take_turns(players, keeps_playing)` yields `(name, outcome)` pairs;
a player who keeps playing rejoins the back of the queue.

### Trees

`BinaryTree` wraps a `TreeNode` root and offers `preorder`, `inorder`,
`postorder`, `height`, `len`, `leaves`, `count_leaves`, `is_complete`
(true when there are `2**height - 1` nodes) and a sideways `render`.
`build_tree(ask_value, ask_child)` builds a tree in preorder by asking for
each value and whether a `"left"` or `"right"` child exists.

`BinarySearchTree` adds `insert` (raises `DuplicateKeyError`),
`insert_iterative` (equal values go right), membership, `maximum`, `minimum`,
`remove` (replaces a two-child node by its in-order predecessor; `KeyError`
if absent), `remove_root`, `remove_with_root_splice`, `clear` and `layout`,
which returns `(column, row, value)` positions for drawing.

`AVLTree` keeps itself balanced on `insert` and `remove` and reports each
node's balance factor through `balance_factors()`.

```python
from dslabs.avl import AVLTree

tree = AVLTree([1, 2, 3, 4, 5])
list(tree), tree.height()   # ([1, 2, 3, 4, 5], 3)
```

## Interactive menus

Run a menu on the console:

```
dslabs                # search tree, word tree and AVL tree menu
dslabs list
dslabs stack
dslabs expression
dslabs palindrome
dslabs queue
dslabs tree
dslabs search-tree
```

Each menu is also a function — `run_list_menu`, `run_stack_menu`,
`run_expression_menu`, `run_palindrome_menu`, `run_queue_menu`,
`run_tree_menu`, `run_search_tree_menu` — taking a `read` callable that
returns one line of input (and raises `EOFError` at the end) and a `write`
callable for output. They stop at their exit option or at end of input and
return the structures they built, so they can be driven from a script.

## What it does not do

The menus do not clear the screen, wait for a key press or move the cursor.
The tree drawings (options 22 and 24 of the search tree menu) are printed as
plain lines of text instead. Nothing is saved between runs.

## Running the tests

```
pip install .[test]
pytest
```