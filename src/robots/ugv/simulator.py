"""
Fake UGV HTTP server — emulates the rover's ESP32 JSON command endpoint.

Run standalone:  uv run python -m robots.ugv.simulator
Starts on port 8080 by default. Point the bridge at it with
UGV_URL=http://localhost:8080.
"""

import random

from fastapi import FastAPI, Query
from fastapi.responses import PlainTextResponse
import uvicorn

from .commands import Move, decode, encode

app = FastAPI(title="Fake UGV Simulator")

# Simulated state
_state = {
    "left": 0.0,
    "right": 0.0,
    "roll": 0.0,
    "pitch": 0.0,
    "yaw": 0.0,
}


def _drift_imu():
    """Integrate a little yaw from the wheel speed difference, plus noise."""
    _state["yaw"] += (_state["right"] - _state["left"]) * 10.0
    _state["yaw"] = round((_state["yaw"] + 180.0) % 360.0 - 180.0, 2)
    _state["roll"] = round(random.uniform(-0.5, 0.5), 2)
    _state["pitch"] = round(random.uniform(-0.5, 0.5), 2)


def reset():
    """Put the simulated rover back at rest."""
    _state.update(left=0.0, right=0.0, roll=0.0, pitch=0.0, yaw=0.0)


@app.get("/js", response_class=PlainTextResponse)
async def js(json: str = Query(...)):
    """Handle one JSON command, like the real firmware's /js endpoint.

    Drive commands are echoed back; telemetry requests return an IMU frame.
    """
    try:
        command = decode(json)
    except ValueError as e:
        return PlainTextResponse(str(e), status_code=400)

    if isinstance(command, Move):
        _state["left"] = command.left_speed
        _state["right"] = command.right_speed
        return encode(command)

    _drift_imu()
    return (
        f'{{"T":1002,"r":{_state["roll"]},"p":{_state["pitch"]},'
        f'"y":{_state["yaw"]},"L":{_state["left"]},"R":{_state["right"]}}}'
    )


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8080)
