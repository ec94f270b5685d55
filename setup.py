from setuptools import setup, find_packages
import re

# Read version from oepcalc/__init__.py
with open('oepcalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='oep-calc',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'oep-calc=oepcalc.cli.__main__:main',
            'oep-calc-mcp=oepcalc.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Earnings and residual income projections for open enrollment agents.',
    python_requires='>=3.10',
)
