"""
Setup script for route-summary
Run: pip install -e .[test]
"""

from setuptools import find_packages, setup

INSTALL_REQUIRES = [
    'gpxpy',
    'pandas',
]
EXTRAS_REQUIRE = {
    'test': ['pytest'],
}

setup(
    name='route-summary',
    version='1.0.0',
    description='Yearly workout statistics from a folder of GPX routes',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        'console_scripts': ['route-summary=route_summary.cli:main'],
    },
)
