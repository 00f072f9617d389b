from pathlib import Path

from setuptools import find_namespace_packages, setup

# Load packages from requirements.txt
BASE_DIR = Path(__file__).parent
with open(Path(BASE_DIR, "requirements.txt")) as file:
    required_packages = [ln.strip() for ln in file.readlines() if ln.strip()]

# Define our package
setup(
    name="lecture-master",
    version="0.1.0",
    description="Quiz bank and attempt history manager with practice, master quiz and review views",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["lecture_master", "lecture_master.*"]),
    package_data={"lecture_master": ["schemas/*.json"]},
    include_package_data=True,
    install_requires=required_packages,
    extras_require={
        "test": ["pytest>=7.0"],
        "dev": ["pytest>=7.0", "pre-commit==2.19.0"],
    },
)
