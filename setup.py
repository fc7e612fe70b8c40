from setuptools import setup, find_packages

setup(
    name='MaritimeZoneSystems',
    version='0.1',
    packages=find_packages(include=['zone_engine', 'zone_engine.*', 'flask_app', 'flask_app.*']),
    install_requires=[
        'Flask',
        'SQLAlchemy>=1.4',
        'psycopg2-binary',
        'pandas',
        'numpy',
        'shapely',
        'requests',
        'python-dotenv'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'run_zones=flask_app.run:main'
        ]
    }
)
