import networkx as nx

from p4sparse.io.graph6 import nx_to_adjlist
from p4sparse.p4.sparse import find_violation
from p4sparse.viz.draw import draw_violation

# Petersen graph: draw the first 5-set with more than one induced P4
adj, _ = nx_to_adjlist(nx.petersen_graph())
v = find_violation(adj)
print(v)
draw_violation(adj, v, save_path="petersen_violation.png")
