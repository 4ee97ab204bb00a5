import os
from glob import glob

from setuptools import find_packages, setup

package_name = 'vrx_waypoint_markers'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'), glob('launch/*launch.py')),
        (os.path.join('share', package_name, 'config'), glob('config/*.yaml')),
    ],
    install_requires=['setuptools', 'PyYAML'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='vrx',
    maintainer_email='vrx@todo.todo',
    description='Cylinder waypoint markers with text labels for the VRX simulation',
    license='Apache-2.0',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'waypoint_markers = vrx_waypoint_markers.waypoint_marker_node:main',
        ],
    },
)
