class Config:
    # State layout
    RIGID_STATE_SIZE = 3  # (cx, cy, alpha)

    # Ramp profiles
    ELDREDGE_RAMP_SHARPNESS = 11.0
    COLONIUS_RAMP_ORDER = 1

    # Sampling used by max_velocity
    MAX_VELOCITY_HORIZON = 20.0
    MAX_VELOCITY_TIME_STEP = 0.01

    # Shapes
    DEFAULT_BODY_POINTS = 100
    PLATE_POINT_CLUSTERING = 1.0  # 1.0 gives uniform spacing; smaller values cluster at the edges

    # Default parameters used by get_kinematics for each kinematics type
    DEFAULT_KINEMATICS_PARAMS = {
        "constant": {
            "c_dot": (0.0, 0.0),
            "alpha_dot": 0.0,
        },
        "oscillation": {
            "ux": 0.0,
            "uy": 0.0,
            "alpha_dot0": 0.0,
            "ax": 0.0,
            "ay": 0.0,
            "omega": 1.0,
            "amp_x": 0.0,
            "amp_y": 0.0,
            "phi_x": 0.0,
            "phi_y": 0.0,
            "alpha0": 0.0,
            "delta_alpha": 0.0,
            "phi_alpha": 0.0,
        },
        "pitch_heave": {
            "ux": 0.0,
            "ax": 0.0,
            "omega": 1.0,
            "alpha0": 0.0,
            "delta_alpha": 0.0,
            "phi_alpha": 0.0,
            "amp_y": 0.0,
            "phi_y": 0.0,
        },
        "oscillation_x": {
            "ux": 0.0,
            "omega": 1.0,
            "amp_x": 0.0,
            "phi_x": 0.0,
        },
        "oscillation_y": {
            "uy": 0.0,
            "omega": 1.0,
            "amp_y": 0.0,
            "phi_y": 0.0,
        },
        "rotational_oscillation": {
            "omega": 1.0,
            "delta_alpha": 0.0,
            "phi_alpha": 0.0,
        },
        "pitchup": {
            "u0": 1.0,
            "a": 0.0,
            "k": 0.2,
            "alpha0": 0.0,
            "t0": 0.5,
            "delta_alpha": 0.7853981633974483,  # pi / 4
        },
    }
