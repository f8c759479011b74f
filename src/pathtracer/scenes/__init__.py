from pathtracer.scenes import final, moving

# Scene name -> create_scene(rng) returning (world, CameraSettings)
SCENES = {
    "final": final.create_scene,
    "moving": moving.create_scene,
}

__all__ = ["SCENES"]
