from setuptools import setup, find_packages

setup(
    name="knowledge-graph-mcp-server",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        "mcp>=1.3.0,<2",
        "pydantic>=2.0.0",  # For argument validation and tool schemas
        "orjson>=3.9.0",    # For faster JSON handling
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "knowledge-graph-mcp-server=knowledge_graph_mcp_server.server:main",
        ],
    },
    python_requires=">=3.11",
)
