from orbitcam.config import load_config
from orbitcam.log import configure_logging

def main():
    cfg = load_config()
    configure_logging(cfg.log_level)
    print("[orbitcam] middle-drag to orbit, wheel to zoom, Z oscillating zoom, R reset, A axes")

    from orbitcam.app import ViewerApp
    app = ViewerApp(cfg)
    app.run()

if __name__ == "__main__":
    main()
