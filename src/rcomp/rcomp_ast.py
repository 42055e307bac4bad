class Node:
    fields = ()
    # Names of the attributes holding child nodes, in evaluation order
    child_fields = ()

    def __init__(self):
        self.parent = None
        self.location = None  # For source locations

    def add_child(self, child):
        """Add a child node and set its parent"""
        if hasattr(child, 'parent'):
            child.parent = self
        return child

    @property
    def children(self):
        return [getattr(self, name) for name in self.child_fields]

    def replace_with(self, new_node):
        """Replace this node with another in the AST.

        The old node is detached; it and its subtree are no longer reachable
        from the tree.
        """
        parent = self.parent
        new_node.parent = parent
        self.parent = None
        if parent is None:
            return False

        for attr in parent.child_fields:
            if getattr(parent, attr) is self:
                setattr(parent, attr, new_node)
                return True
        return False

    def _values(self):
        return tuple(getattr(self, name) for name in self.fields)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._values() == other._values()

    def __repr__(self):
        args = ", ".join(repr(v) for v in self._values())
        return f"{type(self).__name__}({args})"

class Expression(Node):
    fields = ()

    @property
    def is_atomic(self):
        return not self.child_fields

class Fixnum(Expression):
    fields = ('value',)

    def __init__(self, value):
        super().__init__()
        self.value = value

class Read(Expression):
    """(read): an integer supplied at run time."""

    def __init__(self):
        super().__init__()

    @property
    def is_atomic(self):
        # Reading has a side effect, so it never stands in for an operand
        return False

class Var(Expression):
    fields = ('name',)

    def __init__(self, name):
        super().__init__()
        self.name = name

class Neg(Expression):
    fields = ('operand',)
    child_fields = ('operand',)

    def __init__(self, operand):
        super().__init__()
        self.operand = self.add_child(operand)

class Add(Expression):
    fields = ('left', 'right')
    child_fields = ('left', 'right')

    def __init__(self, left, right):
        super().__init__()
        self.left = self.add_child(left)
        self.right = self.add_child(right)

class Let(Expression):
    """(let ([name bound_expr]) body)"""
    fields = ('name', 'bound_expr', 'body')
    child_fields = ('bound_expr', 'body')

    def __init__(self, name, bound_expr, body):
        super().__init__()
        self.name = name
        self.bound_expr = self.add_child(bound_expr)
        self.body = self.add_child(body)
