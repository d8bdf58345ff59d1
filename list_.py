from logger import print_


class ListError(IndexError):
    pass


class Node:
    def __init__(self, data):
        self.data = data
        self.prev = None
        self.next = None


class DList:
    """Doubly linked list keeping references to both ends."""

    def __init__(self):
        self.head = None
        self.tail = None
        self.length = 0

    def unshift(self, data):
        node = Node(data)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self.length += 1
        return node

    def append(self, data):
        node = Node(data)
        if self.tail is None:
            self.head = self.tail = node
        else:
            node.prev = self.tail
            self.tail.next = node
            self.tail = node
        self.length += 1
        return node

    def shift(self):
        if self.head is None:
            raise ListError("shift from empty list")
        node = self.head
        self._unlink(node)
        return node

    def pop(self):
        if self.tail is None:
            print_("pop on empty list")
            raise ListError("pop from empty list")
        node = self.tail
        self._unlink(node)
        return node

    def first(self):
        if self.head is None:
            raise ListError("empty list")
        return self.head.data

    def last(self):
        if self.tail is None:
            raise ListError("empty list")
        return self.tail.data

    def find(self, data):
        iterator = self.head
        while iterator is not None:
            if iterator.data == data:
                return iterator, True
            iterator = iterator.next
        return None, False

    @staticmethod
    def data(node):
        return node.data

    def _unlink(self, node):
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self.length -= 1

    def __iter__(self):
        iterator = self.head
        while iterator is not None:
            yield iterator.data
            iterator = iterator.next

    def __len__(self):
        return self.length


def init_doubly(data) -> DList:
    dlist = DList()
    dlist.append(data)
    return dlist
