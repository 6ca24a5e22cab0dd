from setuptools import setup, find_packages
from pathlib import Path


package_root = Path("ros2_ws/src/minimal_publisher")


def read_requirements(path: str) -> list:
    requirements_path = Path(path)
    if not requirements_path.exists():
        return []
    with open(requirements_path, encoding="utf-8") as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.startswith("#")
        ]


setup(
    name="minimal_publisher",
    version="0.1.0",
    package_dir={"": str(package_root)},
    packages=find_packages(where=str(package_root), exclude=["test", "test.*"]),
    install_requires=read_requirements("requirements/runtime.txt"),
    extras_require={
        "test": read_requirements("requirements/test.txt"),
        "docs": read_requirements("requirements/docs.txt"),
    },
    entry_points={
        "console_scripts": [
            "minimal_publisher = minimal_publisher.publisher_member_function:main",
            "resolve_topic = minimal_publisher.topic_resolver:main",
        ],
    },
)
