from setuptools import find_packages, setup


setup(
    name="AppServer",
    version="1.0.0",
    description="HTTP server bootstrap with a fixed middleware pipeline",
    long_description=open("README.md", encoding="UTF8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11.0",
    license="MIT License",
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Intended Audience :: Developers",
    ],
    install_requires=[
        "fastapi[standard]~=0.115.12",
        "pydantic>=2.0,<3.0",
        "starlette>=0.46.2",
        "dishka~=1.6.0",
        "uvicorn~=0.34.0",
    ],
    extras_require={
        "linters": ["ruff~=0.11.2", "mypy~=1.15.0"],
        "dev": [
            "ruff>=0.11.2",
            "httpx>=0.28.1",
            "pytest-xdist[psutil]",
            "pytest>=8.3.5,<9.0.0",
            "pytest_asyncio>=0.26.0,<1.0.0",
        ],
    },
    packages=find_packages(exclude=["tests", "tests.*"]),
)
