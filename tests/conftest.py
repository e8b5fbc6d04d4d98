import sys
from pathlib import Path

# Add the src directory to sys.path to import ulice without installing it
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.append(str(src_path))
