from fractal_kernels.utilities.env.parsing import _env_int


class RuntimeConfiguration:
    @classmethod
    def max_fps(cls) -> int:
        return _env_int("FRACTAL_MAX_FPS", default=60, minimum=0)
