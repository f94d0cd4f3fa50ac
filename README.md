# linkedstructs

This package provides three small data structures built on singly linked nodes. They are in `linkedstructs.structures`:

- `LinkedList` keeps values in the order they were inserted. `remove` takes out the first match.
- `Stack` is last in, first out.
- `Queue` is first in, first out.

It also has an interactive console menu for trying each structure by hand.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
pytest
```

## Using the structures

```python
from linkedstructs.structures import LinkedList, Stack, Queue

items = LinkedList()
items.insert("a")
items.insert("b")
items.insert("c")
items.remove("b")        # True
items.remove("z")        # False
"a" in items             # True, same as items.contains("a")
list(items)              # ['a', 'c']
len(items)               # 2

stack = Stack()
stack.push("x")
stack.push("y")
list(stack)              # ['y', 'x'], starting from the top
stack.pop()              # 'y'
bool(stack)              # True while the stack has elements

queue = Queue()
queue.enqueue("p")
queue.enqueue("q")
list(queue)              # ['p', 'q'], from front to rear
queue.dequeue()          # 'p'
len(queue)               # 1
```

The structures hold values of any type. `Stack.pop` and `Queue.dequeue` raise `IndexError` when there is nothing to take. Each structure has `clear()`, which removes every element.

## Working set

`linkedstructs.workspace.Workspace` keeps one list, one stack and one queue of single characters together. It offers flat operations for each:

- List: `list_insert`, `list_remove`, `list_contains`, `list_get_all`, `list_size`, `list_clear`
- Stack: `stack_push`, `stack_pop`, `stack_get_all`, `stack_size`, `stack_clear`
- Queue: `queue_enqueue`, `queue_dequeue`, `queue_get_all`, `queue_size`, `queue_clear`

`debug_test()` puts `"D"` into the list, `"S"` onto the stack and `"Q"` into the queue.

```python
from linkedstructs.workspace import Workspace

ws = Workspace()
ws.list_insert("D")
ws.stack_push("S")
ws.queue_enqueue("Q")
ws.list_get_all()        # ['D']
ws.stack_pop()           # 'S'
ws.stack_pop()           # None, because the stack is empty
ws.queue_size()          # 1
```

A value that is not exactly one character raises `ValueError`. `stack_pop` and `queue_dequeue` return `None` on an empty structure instead of raising.

## Interactive menu

To start the menu:

```
linkedstructs
```

The main menu leads to a separate menu for the linked list, the stack and the queue. It also has an entry that shows system information. Enter an option's number to choose it. Enter `0` to go back or to leave. Input that is not a number, or the end of input, counts as `0`. The menu text is in Spanish.

You can also drive the menus from code with `run_main_menu`, `run_linked_list_demo`, `run_stack_demo` and `run_queue_demo` in `linkedstructs.cli`. Pass any text streams as input and output:

```python
import io
from linkedstructs.cli import run_stack_demo

out = io.StringIO()
run_stack_demo(io.StringIO("1\nz\n4\n0\n"), out)
print(out.getvalue())
```

`InteractiveMenu` in the same module builds menus of your own. Add entries with `add_option(description, action)` and start the menu with `run()`.

## What it does not do

The package has no graphical or web front end. `Workspace` offers the operations that such a front end would call, but nothing here draws them on screen. The structures are kept in memory only and are never saved.