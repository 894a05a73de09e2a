"""Configuration for the interactive solar system orrery."""

import math

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Solar System",
    "narrow_width": 768,           # Below this the camera pulls back
}

CAMERA = {
    "fov": 75.0,
    "near_clip": 0.1,
    "far_clip": 3000.0,            # Starfield cube reaches 1000 on each axis
    "initial_radius": 50.0,
    "narrow_radius": 70.0,
    "initial_theta": 90.0,
    "initial_phi": 20.0,
    "min_radius": 5.0,
    "max_radius": 1500.0,
    "min_phi": -89.0,
    "max_phi": 89.0,
    "keyboard_rotate_speed": 60.0,
    "keyboard_zoom_speed": 40.0,
    "mouse_sensitivity": 0.3
}

SIMULATION = {
    "angular_speed_factor": 0.01,  # rad/s per speed unit
    "speed_constant_k": 1000.0,    # default speed = K / orbital_radius
    "speed_min": 1.0,
    "speed_max": 100.0,
    "speed_step": 1.0,             # Per key press
}

# Ordered Sun outwards. Rates are rad/s of self-rotation.
BODIES = [
    {"id": "sun", "orbital_radius": 0.0, "orbits": False,
     "rotation_rate_x": 0.02, "rotation_rate_y": 0.01,
     "radius": 10.0, "segments": 45, "color": (1.0, 0.85, 0.3), "texture": "sun_hd.jpg"},
    {"id": "mercury", "orbital_radius": 15.0,
     "rotation_rate_x": 0.2, "rotation_rate_y": 0.02,
     "radius": 2.0, "segments": 32, "color": (0.6, 0.6, 0.6), "texture": "mercury_hd.jpg"},
    {"id": "venus", "orbital_radius": 25.0,
     "rotation_rate_x": 0.2, "rotation_rate_y": 0.02,
     "radius": 3.0, "segments": 40, "color": (0.9, 0.75, 0.5), "texture": "venus_hd.jpg"},
    {"id": "earth", "orbital_radius": 35.0,
     "rotation_rate_x": 0.2, "rotation_rate_y": 0.02,
     "radius": 3.0, "segments": 40, "color": (0.25, 0.45, 0.9), "texture": "earth_hd.jpg"},
    {"id": "mars", "orbital_radius": 55.0,
     "rotation_rate_x": 0.3, "rotation_rate_y": 0.32,
     "radius": 5.0, "segments": 40, "color": (0.8, 0.35, 0.2), "texture": "mars_hd.jpg"},
    {"id": "jupiter", "orbital_radius": 75.0,
     "rotation_rate_x": 0.2, "rotation_rate_y": 0.02,
     "radius": 3.0, "segments": 35, "color": (0.85, 0.7, 0.55), "texture": "jupiter_hd.jpg"},
    {"id": "saturn", "orbital_radius": 95.0,
     "rotation_rate_x": 0.2, "rotation_rate_y": 0.02,
     "radius": 3.0, "segments": 35, "color": (0.9, 0.8, 0.6), "texture": "saturn_hd.jpg"},
    {"id": "uranus", "orbital_radius": 115.0,
     "rotation_rate_x": 0.2, "rotation_rate_y": 0.02,
     "radius": 3.0, "segments": 35, "color": (0.6, 0.85, 0.9), "texture": "uranus_hd.jpg"},
    {"id": "neptune", "orbital_radius": 135.0,
     "rotation_rate_x": 0.2, "rotation_rate_y": 0.02,
     "radius": 3.0, "segments": 35, "color": (0.3, 0.4, 0.9), "texture": "neptune_hd.jpg"},
]

RING = {
    "name": "saturn_ring",
    "parent": "saturn",
    "inner_radius": 4.0,
    "outer_radius": 7.0,
    "segments": 64,
    "color": (0.533, 0.533, 0.533),  # 0x888888
    "opacity": 0.5,
    "offset": (0.0, 0.0, 0.0),
    "rotation": (math.pi / 2, 0.0, 0.0),  # Lie flat in the orbital plane
}

STARFIELD = {
    "count": 5000,
    "extent": 1000.0,              # Uniform(-extent, extent) per axis
    "color": (1.0, 1.0, 1.0),
    "point_size": 1.0,
}

LIGHTING = {
    "ambient": (0.3, 0.3, 0.3, 1.0),
    "sun_light": (1.0, 1.0, 1.0, 1.0),
    "sun_position": (0.0, 0.0, 0.0, 1.0),
    "fill_light": (0.1, 0.1, 0.1, 1.0),
    "fill_direction": (50.0, 50.0, 50.0, 0.0),
}

ASSETS = {
    "texture_dir": "img",
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "text": (0.9, 0.9, 0.9)
}
