from setuptools import setup, find_packages

setup(
    name="rigid_body_tools",
    version="0.1.0",
    description="Prescribed kinematics and state bookkeeping for rigid and deforming 2D bodies",
    author="Harry Fieldhouse",
    author_email="harryamfieldhouse@gmail.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pymunk>=6.11.1",
        "numpy>=2.2.2"
    ],
    extras_require={
        "test": ["pytest"],
    },
)
