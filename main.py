# main.py
from delivery_sim.app.build import build


def run(seconds: float = 10.0):
    app = build({"name": "demo", "run_id": "demo-1"})

    # A road from the warehouse to a corner, then on to the delivery point.
    # Endpoints only need to land within the snap threshold of each other.
    app.draw_road(80, 80, 400, 82)
    app.draw_road(404, 80, 720, 520)

    # A click (no drag) is ignored.
    app.pointer_down(300, 300)
    app.pointer_up(302, 301)

    app.run(app.clock.to_frame(seconds))
    return app.snapshot()


if __name__ == "__main__":
    snap = run()
    print(f"score={snap.score} vehicle=({snap.vehicle.x:.1f}, {snap.vehicle.y:.1f})")
