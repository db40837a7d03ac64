from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .rules import RUNTIME_CACHING, RuntimeCachingRule

SERVICE_WORKER_FILENAME = "service-worker.js"

# Only present in development builds
DEV_RUNTIME_GLOB = "js/cljs-runtime/**/*"

# Raised from the 2 MiB default so the compiled app.js is precached
MAX_CACHEABLE_FILE_BYTES = 40 * 1024 * 1024


class GenerateSWOptions(BaseModel):
    """DTO for Workbox's generateSW options; serializes with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    glob_directory: str
    glob_patterns: list[str] = Field(default_factory=lambda: ["**/*"])
    glob_ignores: list[str] = Field(default_factory=lambda: [DEV_RUNTIME_GLOB])
    sw_dest: str
    maximum_file_size_to_cache_in_bytes: int = MAX_CACHEABLE_FILE_BYTES
    cleanup_outdated_caches: bool = True
    navigate_fallback: str = "/index.html"
    runtime_caching: list[RuntimeCachingRule] = Field(default_factory=lambda: list(RUNTIME_CACHING))

    @classmethod
    def for_directory(cls, public_out_dir: str) -> "GenerateSWOptions":
        """Options that precache `public_out_dir` and write the worker into it."""
        return cls(
            glob_directory=public_out_dir,
            sw_dest=f"{public_out_dir}/{SERVICE_WORKER_FILENAME}",
        )

    def to_workbox(self) -> dict:
        options = self.model_dump(by_alias=True, exclude={"runtime_caching"})
        options["runtimeCaching"] = [rule.to_workbox() for rule in self.runtime_caching]
        return options
