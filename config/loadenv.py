from pathlib import Path

from dotenv import load_dotenv


ENV_DIR = Path(__file__).resolve().parent.parent / "envs"


def loadenv(env_dir: Path | None = None) -> list[Path]:
    """Load ``*.env`` files from the repository's envs directory.

    Values already present in the environment win. Returns the files read.
    """
    env_dir = env_dir or ENV_DIR
    if not env_dir.exists():
        return []
    loaded = []
    for env_file in sorted(env_dir.glob("*.env")):
        load_dotenv(env_file, override=False)
        loaded.append(env_file)
    return loaded
