"""
PyGamma
=======

Python implementation of graph primitives: graph representations,
depth- and breadth-first traversals, connected components, and
maximum-cardinality matching in general graphs by Edmonds' blossom algorithm.

"""

from .error       import *
from .graph       import *
from .index_graph import *
from .hash_graph  import *
from .traversal   import *
from .components  import *
from .matching    import *
from .greedy      import *
from .blossom     import *
