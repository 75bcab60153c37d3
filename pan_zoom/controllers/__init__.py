from pan_zoom.controllers.zoom_controller import (
    WheelInput,
    WheelSample,
    ZoomController,
    run_immediately,
)

__all__ = ["WheelInput", "WheelSample", "ZoomController", "run_immediately"]
