# examples/demo_scene.py
import logging
from pathlib import Path

from painter3d.scene import load_scene

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    scene = load_scene(Path(__file__).with_name("scene.json"))
    for frame in range(5):
        buf = scene.render()
        print(f"frame {frame}: {buf[0]} visible, buffer {buf[:7]}...")
        scene.tick()
