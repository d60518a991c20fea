from quadromon.transports.replay.transport import ReplayTransport, load_hex_dump

__all__ = ["ReplayTransport", "load_hex_dump"]
