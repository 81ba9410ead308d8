"""Launch request builder steps and the pipeline that runs them."""

from .pipeline import BuildContext, BuilderStep, FunctionStep, LaunchPipeline, builder_step

__all__: list[str] = [
    "BuildContext",
    "BuilderStep",
    "FunctionStep",
    "LaunchPipeline",
    "builder_step",
]
