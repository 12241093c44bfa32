from setuptools import setup, find_packages

setup(name='rigidmath',
      version='1.0.0',
      description='Rigid 2D/3D transforms, unit quaternions and vectors with a global numerical tolerance',
      packages=find_packages(include=['rigidmath', 'rigidmath.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']})
