"""
model_transform_pipeline.py
Defines a pipeline for transforming Model objects using a sequence of ModelTransform objects.
"""
from typing import List, Protocol
from model import Model

class ModelTransform(Protocol):
    def transform(self, model: Model) -> Model:
        ...

def run_model_transform_pipeline(
    model: Model,
    transforms: List[ModelTransform],
    verbose: bool = False
) -> Model:
    """
    Applies a sequence of ModelTransform objects to a Model, in order.
    """
    for transform in transforms:
        if verbose:
            import sys
            print(f"[DEBUG] Running model transform {type(transform).__name__} on {model.file}", file=sys.stderr)
        model = transform.transform(model)
    return model
