from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

# anchors sit this far in from the top-left and bottom-right corners by default
ANCHOR_INSET = 80.0


class SimModel(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)
    fps: float = Field(default=60.0, gt=0)


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=60, ge=1)  # frames between sampled debug lines


class WorldModel(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)
    width: float = Field(default=800.0, gt=0)
    height: float = Field(default=600.0, gt=0)
    origin: tuple[float, float] | None = None  # warehouse
    destination: tuple[float, float] | None = None  # delivery
    min_drag: float = Field(default=5.0, ge=0)  # shorter drags are clicks, not roads

    @model_validator(mode="after")
    def _default_anchors(self):
        if self.origin is None:
            self.origin = (ANCHOR_INSET, ANCHOR_INSET)
        if self.destination is None:
            self.destination = (self.width - ANCHOR_INSET, self.height - ANCHOR_INSET)
        return self


class VehicleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    speed: float = 2.0  # distance units per tick

    @field_validator("speed")
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v) or v <= 0:
            raise ValueError(f"{info.field_name} must be a finite number > 0")
        return v


# ----------------- MECHANICS ---------------------


class GraphBuilderSnappingModel(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)
    kind: Literal["snapping"] = "snapping"
    snap_threshold: float = Field(default=10.0, gt=0)


GraphBuilderUnion = Annotated[GraphBuilderSnappingModel, Field(discriminator="kind")]


class RoutePlannerBfsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


RoutePlannerUnion = Annotated[RoutePlannerBfsModel, Field(discriminator="kind")]


class PathTraverserFixedStepModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["fixed_step"] = "fixed_step"


PathTraverserUnion = Annotated[PathTraverserFixedStepModel, Field(discriminator="kind")]


class MechanicsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    graph_builder: GraphBuilderUnion = Field(default_factory=GraphBuilderSnappingModel)
    route_planner: RoutePlannerUnion = Field(default_factory=RoutePlannerBfsModel)
    path_traverser: PathTraverserUnion = Field(default_factory=PathTraverserFixedStepModel)


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "sandbox"
    run_id: str = "local"
    sim: SimModel = Field(default_factory=SimModel)
    log: LogModel = Field(default_factory=LogModel)
    world: WorldModel = Field(default_factory=WorldModel)
    vehicle: VehicleModel = Field(default_factory=VehicleModel)
    mechanics: MechanicsModel = Field(default_factory=MechanicsModel)
