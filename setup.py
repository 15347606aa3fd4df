from setuptools import setup, find_namespace_packages

setup(
    name="srp-auth",                         # PyPI-safe package name
    version="0.1.0",                         # Semantic version
    author="",
    author_email="",
    description="SRP-6a mutual authentication core with pluggable account and pending-state stores",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    url="",
    packages=find_namespace_packages(include=["srp_auth", "srp_auth.*"]),  # no __init__.py files
    include_package_data=True,
    install_requires=[                       # runtime dependencies
        "fastapi>=0.115.0",
        "httpx>=0.28.1",
        "pydantic>=2.11.4",
        "pydantic_settings>=2.9.1",
        "redis>=5.2.1",
        "sqlalchemy>=2.0.41",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.5",
        ],
    },
    python_requires=">=3.10",
)
