__all__ = ['GraphError', 'UnknownNode', 'DuplicateNode', 'DuplicateEdge',
           'InvalidEdge', 'MissingEdge', 'InvalidMatching']


class GraphError(ValueError):
    """
    Base class of all errors raised for invalid graph input.
    """


class UnknownNode(GraphError):
    """
    An operation referenced a node identifier absent from the graph.
    """
    def __init__(self, id):
        super().__init__(f'unknown node {id!r}')
        self.id = id


class DuplicateNode(GraphError):
    """
    A node identifier was declared more than once.
    """
    def __init__(self, id):
        super().__init__(f'duplicate node {id!r}')
        self.id = id


class DuplicateEdge(GraphError):
    """
    The same unordered pair of nodes was declared as an edge more than once.
    """
    def __init__(self, source, target):
        super().__init__(f'duplicate edge ({source!r}, {target!r})')
        self.source = source
        self.target = target


class InvalidEdge(GraphError):
    """
    An edge connects a node to itself.
    """
    def __init__(self, source, target):
        super().__init__(f'invalid edge ({source!r}, {target!r})')
        self.source = source
        self.target = target


class MissingEdge(GraphError):
    """
    Adjacency input lacks the back-reference of an undirected edge.
    """
    def __init__(self, source, target):
        super().__init__(f'missing edge ({source!r}, {target!r})')
        self.source = source
        self.target = target


class InvalidMatching(GraphError):
    """
    A supplied matching covers a node twice, or pairs two nodes
    which are not adjacent in the graph.
    """
    def __init__(self, id, target=None):
        if target is None:
            super().__init__(f'node {id!r} is covered more than once')
        else:
            super().__init__(f'pair ({id!r}, {target!r}) is not an edge of the graph')
        self.id = id
        self.target = target
