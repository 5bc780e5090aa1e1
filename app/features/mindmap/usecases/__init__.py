"""Mind map use cases."""

from .edges.create_edge_usecase import CreateEdgeUseCaseImpl
from .edges.delete_edge_usecase import DeleteEdgeUseCaseImpl
from .edges.get_edge_usecase import GetEdgeUseCaseImpl
from .edges.list_edges_usecase import ListEdgesUseCaseImpl
from .edges.update_edge_usecase import UpdateEdgeUseCaseImpl
from .nodes.create_node_usecase import CreateNodeUseCaseImpl
from .nodes.delete_node_usecase import DeleteNodeUseCaseImpl
from .nodes.get_node_usecase import GetNodeUseCaseImpl
from .nodes.list_nodes_usecase import ListNodesUseCaseImpl
from .nodes.update_node_usecase import UpdateNodeUseCaseImpl

__all__ = [
    "CreateNodeUseCaseImpl",
    "GetNodeUseCaseImpl",
    "UpdateNodeUseCaseImpl",
    "DeleteNodeUseCaseImpl",
    "ListNodesUseCaseImpl",
    "CreateEdgeUseCaseImpl",
    "GetEdgeUseCaseImpl",
    "UpdateEdgeUseCaseImpl",
    "DeleteEdgeUseCaseImpl",
    "ListEdgesUseCaseImpl",
]
