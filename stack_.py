from list_ import ListError, init_doubly


class EmptyStackError(ListError):
    pass


class LStack:
    """LIFO stack whose items live in a doubly linked list."""

    def __init__(self, items):
        self.items = items

    def push(self, item):
        self.items.append(item)

    def pop(self):
        """Remove and return the last pushed item."""
        try:
            node = self.items.pop()
        except ListError as e:
            raise EmptyStackError("pop from empty stack") from e
        return self.items.data(node)

    def peek(self):
        try:
            return self.items.last()
        except ListError as e:
            raise EmptyStackError("peek on empty stack") from e

    def search(self, item) -> bool:
        _, found = self.items.find(item)
        return found

    def size(self) -> int:
        return len(self.items)


def new_linked(item) -> LStack:
    """Create a stack holding `item` as its only element."""
    return LStack(init_doubly(item))
