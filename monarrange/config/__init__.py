from monarrange.config.settings import DEFAULT_SLIDE_STEP, EngineConfig

__all__ = ["DEFAULT_SLIDE_STEP", "EngineConfig"]
