# structkit

Plain-Python implementations of the classic data structures: singly and
doubly linked lists, array-backed and linked stacks and queues, a binary
search tree and a red-black tree. Nothing beyond the standard library is
needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                          | Contents                                                         |
|---------------------------------|------------------------------------------------------------------|
| `structkit.singly_linked_list`  | `SinglyLinkedList`                                               |
| `structkit.doubly_linked_list`  | `DoublyLinkedList`                                               |
| `structkit.stacks`              | `ArrayStack`, `LinkedStack`, `StackFullError`, `StackEmptyError`, `main` |
| `structkit.queues`              | `ArrayQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `structkit.bst`                 | `BST`, `TreeNode`                                                |
| `structkit.rbtree`              | `RBTree`, `RBNode`, `Color`, `main`                              |

Every container supports `len()` and `is_empty()`.

## Linked lists

Both lists take an optional iterable of initial items and can be iterated.

```python
from structkit.singly_linked_list import SinglyLinkedList
from structkit.doubly_linked_list import DoublyLinkedList

items = SinglyLinkedList([1, 2, 3])
items.insert_front(0)
items.insert_back(4)
list(items)            # [0, 1, 2, 3, 4]
items.remove_front()   # 0
items.remove_back()    # 4
items.find(3)          # 2  (-1 when absent)
items.at(1)            # 2
print(items)           # [ 1 ] ==> [ 2 ] ==> [ 3 ]

both_ways = DoublyLinkedList(["a", "b", "c"])
list(reversed(both_ways))   # ['c', 'b', 'a']
both_ways.remove("b")       # 'b'
print(both_ways)            # {FRONT}: [ a ] ==> {REAR}: [ c ]
```

`SinglyLinkedList` also has `delete_at(position)`, which removes and
returns the element at a position, and `delete_value(value)`, which removes
the first matching element and returns the position it held.

Removing from an empty list, and `at` or `delete_at` with a position out of
range, raise `IndexError`. `SinglyLinkedList.delete_value` and
`DoublyLinkedList.remove` raise `ValueError` when the value is not in the
list. An empty list prints as `The list is empty`.

## Stacks

`ArrayStack(capacity=64)` holds at most `capacity` elements and raises
`StackFullError` when a push would exceed it; its `capacity` property and
`is_full()` report the limit. `LinkedStack` is unbounded. Both raise
`StackEmptyError` from `pop()` and `peek()` when empty. The two error
classes derive from `RuntimeError`.

```python
from structkit.stacks import ArrayStack, LinkedStack, StackEmptyError

stack = ArrayStack(8)
for letter in "abc":
    stack.push(letter)
stack.peek()   # 'c'
stack.pop()    # 'c'
len(stack)     # 2

linked = LinkedStack()
try:
    linked.pop()
except StackEmptyError as error:
    print(error)   # Stack is empty
```

## Queues

`ArrayQueue(capacity=128)` is a fixed-capacity circular buffer. `insert`
appends at the rear; `enqueue` places the value before the first element
larger than it, so a queue filled only through `enqueue` comes out in
ascending order. `remove()` and `peek()` work on the front, and iterating
the queue yields its elements from front to rear. It raises
`QueueFullError` when full and `QueueEmptyError` when empty. `LinkedQueue`
has the same `insert`, `remove` and `peek` without a capacity limit.

```python
from structkit.queues import ArrayQueue, LinkedQueue

priority = ArrayQueue(4)
for value in (3, 1, 2):
    priority.enqueue(value)
list(priority)      # [1, 2, 3]

queue = LinkedQueue()
queue.insert(1)
queue.insert(2)
queue.remove()      # 1
```

## Trees

`BST` is an unbalanced binary search tree; `RBTree` keeps itself balanced
with the red-black rules. In both, equal keys go to the right subtree.

```python
from structkit.bst import BST
from structkit.rbtree import RBTree

tree = BST()
for key in (50, 30, 70, 20, 40):
    tree.insert(key)
40 in tree             # True
tree.minimum()         # 20
tree.maximum()         # 70
tree.delete(30)        # True  (False when the key is absent)
list(tree.inorder())   # [20, 40, 50, 70]

balanced = RBTree()
for key in (50, 30, 70, 20, 40, 37, 44, 10, 17, 60, 90, 38):
    balanced.insert(key)
balanced.remove(37)    # True
balanced.black_height()
```

`minimum()` and `maximum()` return `None` for an empty tree. `preorder()`
and `inorder()` are generators; for `RBTree`, `preorder()` yields
`(key, Color)` pairs, where `Color` is `Color.BLACK` (0) or `Color.RED` (1).
`RBTree.black_height()` checks the red-black properties, raising
`RuntimeError` if one is broken, and returns the number of black nodes on
every path from the root down.

## Command-line demos

Two small demonstrations are installed as commands:

```
structkit-stack-demo
structkit-rbtree-demo
```

`structkit-stack-demo` pushes the letters `s` to `z` onto an `ArrayStack`,
peeks and pops, pops the rest, prints the stack's capacity, and then prints
the error raised by popping the empty stack. `structkit-rbtree-demo` builds
an `RBTree` from a fixed set of keys and prints each key with its colour
value (0 for black, 1 for red) in preorder.