from core.plugin import RobotPlugin, RobotMetadata


class UgvPlugin(RobotPlugin):
    def metadata(self) -> RobotMetadata:
        return RobotMetadata(
            name="UGV Rover",
            description="A Waveshare-style six-wheel UGV rover driven through its ESP32 JSON command interface.",
            robot_type="differential_drive",
            url_prefix="ugv",
            instructions="This server commands the rover to move forward, move backward or stop, "
            "and reports IMU telemetry after each command.",
        )

    def tool_names(self) -> list[str]:
        return [
            "move_forward",
            "move_backward",
            "stop",
        ]

    def register_tools(self, mcp):
        from .client import UgvClient
        from .config import UgvConfig
        from .controller import UgvController
        from .tools import register

        config = UgvConfig.from_env()
        register(mcp, UgvController(UgvClient(config), config))
