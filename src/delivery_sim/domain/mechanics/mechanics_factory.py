# delivery_sim/domain/mechanics/mechanics_factory.py

from delivery_sim.config.models import MechanicsModel
from delivery_sim.domain.mechanics.mechanics_core import Mechanics
from delivery_sim.runtime.registries import (
    make_graph_builder,
    make_path_traverser,
    make_route_planner,
)


def build_mechanics(cfg: MechanicsModel | None = None) -> Mechanics:
    cfg = cfg or MechanicsModel()
    return Mechanics(
        graph_builder=make_graph_builder(cfg.graph_builder),
        route_planner=make_route_planner(cfg.route_planner),
        path_traverser=make_path_traverser(cfg.path_traverser),
    )
