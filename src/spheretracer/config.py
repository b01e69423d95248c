# config.py

# Render presets: image scale relative to the configured size,
# samples per pixel and bounce depth.
QUALITY_LEVELS = {
    "low": {"scale": 0.25, "samples": 8, "bounces": 4},
    "medium": {"scale": 0.5, "samples": 20, "bounces": 8},
    "high": {"scale": 1.0, "samples": 50, "bounces": 10},
}

TONE_MAPPINGS = ("gamma", "reinhard")

class RenderSettings:
    """
    Numeric configuration of one render. Defaults reproduce the reference
    image: 800x600, 50 samples per pixel, 10 bounces, 90 degree field of view.
    """
    def __init__(self, width: int = 800, height: int = 600,
                 samples_per_pixel: int = 50, max_depth: int = 10,
                 fov: float = 90.0, seed: int = 0, workers: int = 1,
                 tone_mapping: str = "gamma", verbose: bool = True):
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.fov = fov
        self.seed = seed
        self.workers = workers
        self.tone_mapping = tone_mapping
        self.verbose = verbose
        self.validate()

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def validate(self):
        for name in ("width", "height", "samples_per_pixel", "max_depth", "workers"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not 0 < self.fov < 180:
            raise ValueError(f"fov must be between 0 and 180 degrees, got {self.fov!r}")
        if self.tone_mapping not in TONE_MAPPINGS:
            raise ValueError(
                f"Unknown tone mapping {self.tone_mapping!r}, expected one of {TONE_MAPPINGS}")

    @classmethod
    def from_quality(cls, quality: str, **overrides) -> "RenderSettings":
        """
        Settings for a named quality level. ``overrides`` wins over the preset;
        the preset's scale applies to the (possibly overridden) image size.
        """
        if quality not in QUALITY_LEVELS:
            raise ValueError(
                f"Unknown quality {quality!r}, expected one of {sorted(QUALITY_LEVELS)}")
        level = QUALITY_LEVELS[quality]
        width = overrides.pop("width", 800)
        height = overrides.pop("height", 600)
        overrides.setdefault("samples_per_pixel", level["samples"])
        overrides.setdefault("max_depth", level["bounces"])
        return cls(width=max(1, int(width * level["scale"])),
                   height=max(1, int(height * level["scale"])),
                   **overrides)

    def __repr__(self) -> str:
        return (f"RenderSettings({self.width}x{self.height}, "
                f"spp={self.samples_per_pixel}, depth={self.max_depth}, "
                f"fov={self.fov}, seed={self.seed}, workers={self.workers})")
