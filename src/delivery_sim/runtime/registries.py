# runtime/registries.py
from collections.abc import Callable

from delivery_sim.app.protocols import GraphBuilder, PathTraverser, RoutePlanner
from delivery_sim.config.models import (
    GraphBuilderSnappingModel,
    GraphBuilderUnion,
    PathTraverserFixedStepModel,
    PathTraverserUnion,
    RoutePlannerBfsModel,
    RoutePlannerUnion,
)
from delivery_sim.domain.mechanics.mechanics_graph import SnappingGraphBuilder
from delivery_sim.domain.mechanics.mechanics_path_traversers import FixedStepTraverser
from delivery_sim.domain.mechanics.mechanics_routers import BfsRouter

GraphBuilderFactory = Callable[[GraphBuilderUnion, dict], GraphBuilder]
RoutePlannerFactory = Callable[[RoutePlannerUnion, dict], RoutePlanner]
PathTraverserFactory = Callable[[PathTraverserUnion, dict], PathTraverser]

_graph_builder_registry: dict[str, GraphBuilderFactory] = {}
_route_planner_registry: dict[str, RoutePlannerFactory] = {}
_path_traverser_registry: dict[str, PathTraverserFactory] = {}


def _lookup(registry: dict, kind: str, what: str):
    try:
        return registry[kind]
    except KeyError:
        raise ValueError(f"Unknown {what} kind {kind!r}") from None


# --------------------- Graph Builders ---------------------


def register_graph_builder(kind: str):
    def deco(fn: GraphBuilderFactory):
        _graph_builder_registry[kind] = fn
        return fn

    return deco


def make_graph_builder(cfg: GraphBuilderUnion, *, deps: dict | None = None) -> GraphBuilder:
    return _lookup(_graph_builder_registry, cfg.kind, "graph builder")(cfg, deps or {})


@register_graph_builder("snapping")
def _make_snapping(cfg: GraphBuilderSnappingModel, deps):
    return SnappingGraphBuilder(snap_threshold=cfg.snap_threshold)


# --------------------- Route Planners  ---------------------


def register_route_planner(kind: str):
    def deco(fn: RoutePlannerFactory):
        _route_planner_registry[kind] = fn
        return fn

    return deco


def make_route_planner(cfg: RoutePlannerUnion, *, deps: dict | None = None) -> RoutePlanner:
    return _lookup(_route_planner_registry, cfg.kind, "route planner")(cfg, deps or {})


@register_route_planner("bfs")
def _make_bfs(cfg: RoutePlannerBfsModel, deps):
    return BfsRouter()


# ---------------------- Path Traversers ----------------------------


def register_path_traverser(kind: str):
    def deco(fn: PathTraverserFactory):
        _path_traverser_registry[kind] = fn
        return fn

    return deco


def make_path_traverser(cfg: PathTraverserUnion, *, deps: dict | None = None) -> PathTraverser:
    return _lookup(_path_traverser_registry, cfg.kind, "path traverser")(cfg, deps or {})


@register_path_traverser("fixed_step")
def _make_fixed_step(cfg: PathTraverserFixedStepModel, deps):
    return FixedStepTraverser()
