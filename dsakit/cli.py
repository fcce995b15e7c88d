"""Interactive menus and one-shot commands for the package's data structures."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from .bst import BinarySearchTree, DuplicateValueError, EmptyTreeError, Traversal
from .expressions import ExpressionError, evaluate_postfix, operand_names
from .linked_list import LinkedList, ListEmptyError
from .queues import LinkedQueue, QueueEmptyError
from .recursion import binary_to_decimal, decimal_to_binary
from .stack import Stack, StackEmptyError

Action = tuple[str, Callable[[], None]]


class _Quit(Exception):
    """Input ran out while a menu was waiting for it."""


def _ask_int(prompt: str) -> int:
    while True:
        try:
            text = input(prompt)
        except EOFError:
            raise _Quit from None
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def _show(values: Iterable[object]) -> str:
    return " ".join(map(str, values))


def _run_menu(title: str, actions: Sequence[Action], farewell: str | None = None) -> int:
    labels = [label for label, _ in actions] + ["Exit"]
    while True:
        print(f"\n{title}")
        for number, label in enumerate(labels, 1):
            print(f"  {number}. {label}")
        try:
            choice = _ask_int("Enter your choice: ")
            if choice == len(labels):
                break
            if not 1 <= choice < len(labels):
                print("Invalid choice! Please try again.")
                continue
            actions[choice - 1][1]()
        except _Quit:
            break
    if farewell:
        print(farewell)
    return 0


def _report(
    template: str, compute: Callable[[], object], empty: str = "Tree is empty."
) -> Callable[[], None]:
    def action() -> None:
        try:
            result = compute()
        except (EmptyTreeError, ListEmptyError, StackEmptyError, QueueEmptyError):
            print(empty)
        else:
            print(template.format(result))

    return action


def _bst_menu(_args: argparse.Namespace) -> int:
    tree = BinarySearchTree()

    def insert() -> None:
        value = _ask_int("Please enter the value: ")
        try:
            tree.insert(value)
        except DuplicateValueError:
            print("Duplicate data is not allowed!")
        else:
            print("Inserted")

    def display() -> None:
        if len(tree) == 0:
            print("Tree is empty.")
            return
        orders = {1: Traversal.INORDER, 2: Traversal.PREORDER, 3: Traversal.POSTORDER}
        print("Traversal Options:\n  1. Inorder\n  2. Preorder\n  3. Postorder")
        order = orders.get(_ask_int("Enter your choice: "))
        if order is None:
            print("Invalid choice!")
            return
        print(_show(tree.traverse(order)))

    def find_parent() -> None:
        if len(tree) == 0:
            print("Tree is empty.")
            return
        value = _ask_int("Enter the node to find its parent: ")
        try:
            parent = tree.find_parent(value)
        except KeyError:
            print(f"Node {value} not found in the tree.")
            return
        if parent is None:
            print("The node is root. It has no parent.")
        else:
            print(f"Parent node is {parent}")

    actions: list[Action] = [
        ("Insert in Binary Search Tree", insert),
        ("Display Traversals", display),
        ("Count Total Node", _report("Total node in BST is {}", lambda: len(tree))),
        ("Count Total Leaf Node", _report("Total leaf node in BST is {}", tree.count_leaves)),
        (
            "Count Node With Only Left Child",
            _report("Number of node with only left child is {}", tree.count_only_left_child),
        ),
        (
            "Count Node With Only Right Child",
            _report("Number of node with only right child is {}", tree.count_only_right_child),
        ),
        ("Count Node With Parent", _report("Number of node with parent is {}", tree.count_with_parent)),
        (
            "Count Node With Both Child",
            _report("Number of node with both child is {}", tree.count_both_children),
        ),
        ("Highest Value In BST", _report("Highest value in BST is {}", tree.highest)),
        ("Least Value In BST", _report("Least value in BST is {}", tree.least)),
        (
            "Count Node On Left Side Of BST",
            _report("Total node on left side of BST is {}", tree.count_left_side),
        ),
        (
            "Count Node On Right Side Of BST",
            _report("Total node on right side of BST is {}", tree.count_right_side),
        ),
        ("Height of BST", _report("Height of BST is {}", tree.height)),
        ("Depth of BST", _report("Depth of BST is {}", tree.depth)),
        ("Find Parent of a Node", find_parent),
        (
            "Count of nodes having only one child",
            _report("Number of nodes having only 1 child are = {}", tree.count_one_child),
        ),
        (
            "Count of Siblings",
            _report(
                "Number of Nodes Having Common Parent OR Count of Nodes that are Siblings are = {}",
                tree.count_siblings,
            ),
        ),
    ]
    return _run_menu("Binary Search Tree Operation:", actions)


def _list_menu(_args: argparse.Namespace) -> int:
    items = LinkedList()

    def inserter(method: Callable[[int], None]) -> Callable[[], None]:
        def action() -> None:
            method(_ask_int("Enter data to insert: "))
            print("Inserted")

        return action

    def deleter(method: Callable[[], object]) -> Callable[[], None]:
        def action() -> None:
            try:
                value = method()
            except ListEmptyError:
                print("List is Empty!!")
            except IndexError:
                print("Node not Exist")
            else:
                print(f"Node deleted = {value}")

        return action

    def finder(kind: str, method: Callable[[], list[int]]) -> Callable[[], None]:
        def action() -> None:
            if len(items) == 0:
                print("List is Empty!!")
                return
            found = method()
            print(_show(found))
            print(f"Total {kind} Numbers Present = {len(found)}")

        return action

    def display() -> None:
        if len(items) == 0:
            print("List is empty.")
            return
        print(str(items))

    def delete_alternate() -> None:
        if len(items) == 0:
            print("List is Empty!!")
            return
        removed = items.delete_alternate()
        print(f"Nodes deleted = {_show(removed)}" if removed else "No node deleted")

    def delete_specific() -> None:
        value = _ask_int("Enter data to delete: ")
        try:
            items.delete_value(value)
        except ValueError:
            print(f"Node {value} not found.")
        else:
            print(f"Node deleted = {value}")

    def alternate_display() -> None:
        if len(items) == 0:
            print("List is Empty")
            return
        shown = items.alternate()
        print(_show(shown))

    def count_nodes() -> int:
        total = len(items)
        if total == 0:
            raise ListEmptyError("list is empty")
        return total

    actions: list[Action] = [
        ("Insert at beginning", inserter(items.insert_at_beginning)),
        ("Insert at End", inserter(items.insert_at_end)),
        ("Insert node after first node", inserter(items.insert_after_first)),
        ("Insert node before last node", inserter(items.insert_before_last)),
        ("Insert node in ascending order", inserter(items.insert_in_ascending_order)),
        ("Display", display),
        ("Delete first node", deleter(items.delete_first)),
        ("Delete last node", deleter(items.delete_last)),
        ("Delete node after first node", deleter(items.delete_after_first)),
        ("Delete node before last node", deleter(items.delete_before_last)),
        ("Delete alternate node", delete_alternate),
        ("Delete specific node", delete_specific),
        ("Display alternate node", alternate_display),
        ("Count and Display node with prime", finder("Prime", items.primes)),
        ("Count and Display node with Armstrong", finder("Armstrong", items.armstrongs)),
        ("Count and Display node with palindrome", finder("Palindrome", items.palindromes)),
        (
            "Total number of node present in linked list",
            _report(
                "Total number of node present in linked list are {}",
                count_nodes,
                empty="List is Empty.",
            ),
        ),
    ]
    return _run_menu("Linked List Operation:", actions)


def _stack_menu(args: argparse.Namespace) -> int:
    stack: Stack[int] = Stack(args.capacity)

    def push() -> None:
        if stack.is_full():
            print("Stack is Overflow.")
            return
        value = _ask_int("Enter element to push: ")
        stack.push(value)
        print(f"Element {value} is Push.")

    def pop() -> None:
        try:
            value = stack.pop()
        except StackEmptyError:
            print("Stack is underflow.")
        else:
            print(f"Element {value} is Pop.")

    def display() -> None:
        if stack.is_empty():
            print("Stack is Empty.")
            return
        print(_show(stack))

    actions: list[Action] = [
        ("Push the element", push),
        ("Pop the element", pop),
        ("Display the element", display),
    ]
    return _run_menu("Stack Operation:", actions, farewell="Thank you!")


def _queue_menu(_args: argparse.Namespace) -> int:
    queue = LinkedQueue()

    def enqueue() -> None:
        value = _ask_int("Enter data: ")
        queue.enqueue(value)
        print(f"{value} Is Inserted")

    def dequeue() -> None:
        try:
            value = queue.dequeue()
        except QueueEmptyError:
            print("Queue is empty.")
        else:
            print(f"{value} deleted")

    def display() -> None:
        if queue.is_empty():
            print("Queue is empty.")
            return
        print(_show(queue))

    actions: list[Action] = [
        ("Enqueue in Queue", enqueue),
        ("Dequeue in Queue", dequeue),
        ("Display Queue", display),
        ("Peek in Queue", _report("Front of queue: {}", queue.peek, empty="Queue is empty.")),
    ]
    return _run_menu("Queue Operation:", actions)


def _assignment(text: str) -> tuple[str, int]:
    name, sep, number = text.partition("=")
    if not sep or len(name) != 1 or not (name.isascii() and name.isalpha()):
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE with a one-letter name, got {text!r}")
    try:
        return name, int(number)
    except ValueError:
        raise argparse.ArgumentTypeError(f"value of {name!r} must be a whole number") from None


def _postfix(args: argparse.Namespace) -> int:
    values = dict(args.values)
    try:
        for name in operand_names(args.expression):
            if name not in values:
                values[name] = _ask_int(f"Enter value of {name}: ")
    except _Quit:
        print("error: missing operand values", file=sys.stderr)
        return 1
    try:
        result = evaluate_postfix(args.expression, values)
    except ExpressionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Answer is {result}")
    return 0


def _to_binary(args: argparse.Namespace) -> int:
    try:
        print(decimal_to_binary(args.number))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def _to_decimal(args: argparse.Namespace) -> int:
    try:
        value = binary_to_decimal(args.digits)
    except ValueError:
        print("Invalid Binary Number")
        return 1
    print(f"Decimal = {value}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit", description="Data structure playground.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("bst", help="binary search tree menu").set_defaults(run=_bst_menu)
    commands.add_parser("list", help="linked list menu").set_defaults(run=_list_menu)
    stack = commands.add_parser("stack", help="bounded stack menu")
    stack.add_argument("--capacity", type=int, default=10)
    stack.set_defaults(run=_stack_menu)
    commands.add_parser("queue", help="linked queue menu").set_defaults(run=_queue_menu)

    postfix = commands.add_parser("postfix", help="evaluate a postfix expression")
    postfix.add_argument("expression")
    postfix.add_argument("values", nargs="*", type=_assignment, metavar="NAME=VALUE")
    postfix.set_defaults(run=_postfix)

    to_binary = commands.add_parser("to-binary", help="convert a decimal number to binary")
    to_binary.add_argument("number", type=int)
    to_binary.set_defaults(run=_to_binary)

    to_decimal = commands.add_parser("to-decimal", help="convert a binary number to decimal")
    to_decimal.add_argument("digits")
    to_decimal.set_defaults(run=_to_decimal)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "stack" and args.capacity <= 0:
        parser.error("--capacity must be positive")
    return args.run(args)


if __name__ == "__main__":
    sys.exit(main())