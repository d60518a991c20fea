import argparse
import sys

import uvicorn

from quadromon.local_server_app import create_app, MonitorSettings


class LocalServer:
    def __init__(self, settings: MonitorSettings) -> None:
        self.settings = settings
        self.app = create_app(settings=self.settings)

    def start(self) -> None:
        uvicorn.run(self.app, host=self.settings.server_ip, port=self.settings.server_port, log_level="info")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve Quadro sensor readings over HTTP.")
    parser.add_argument("--ip", type=str, default="127.0.0.1", help="IP address to bind the local server to.")
    parser.add_argument("--port", type=int, default=10281, help="Port to run the local server on.")
    parser.add_argument("--device-path", type=str, default=None, help="HID device path to open instead of the first Quadro found.")
    parser.add_argument("--replay", type=str, default=None, help="Serve reports from a hex dump file instead of the device.")
    parser.add_argument("--interval", type=float, default=1.0, help="Seconds between polls.")

    args = parser.parse_args(argv)
    settings = MonitorSettings(
        server_ip=args.ip,
        server_port=args.port,
        device_path=args.device_path,
        replay_file=args.replay,
        poll_interval=args.interval,
    )
    server = LocalServer(settings)
    server.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
