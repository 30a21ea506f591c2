from setuptools import setup, find_packages

setup(
    name="kubectl-rook-ceph",
    version="0.1.0",
    description="kubectl plugin for troubleshooting Rook-Ceph clusters.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13",
        "python-json-logger>=3.1",
        "pydantic>=2",
        "pyyaml>=6",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "kubectl-rook-ceph=rook_ceph.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
    ],
)
