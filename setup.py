from setuptools import setup, find_packages

setup(name='sequence_pwm',
      version="1.0.0",
      description="Calculate position weight matrices from aligned protein sequences",
      author='sequence_pwm developers',
      license='Apache 2.0',
      packages=find_packages(include=["sequence_pwm", "sequence_pwm.*"]),
	  include_package_data=False,
      python_requires='>=3.8',
      install_requires=['numpy', 'pandas>=1.5', 'biopython'],
      extras_require={'test': ['pytest']},
      entry_points = {
        'console_scripts': ['make_pwm=sequence_pwm.scripts.make_pwm:main']
      },
      zip_safe=True)
