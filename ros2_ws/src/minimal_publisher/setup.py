from setuptools import find_packages, setup

package_name = 'minimal_publisher'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
    ],
    install_requires=['setuptools'],
    zip_safe=True,
    maintainer='gsmst',
    maintainer_email='rahejasachit@gmail.com',
    description='Publisher node whose topic name is resolved from the TOPICS environment variable',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
            'PyYAML',
        ],
    },
    entry_points={
        'console_scripts': [
            'minimal_publisher = minimal_publisher.publisher_member_function:main',
            'resolve_topic = minimal_publisher.topic_resolver:main'
        ],
    },
)



'''
Build and run:
colcon build --packages-select minimal_publisher bringup
source install/setup.bash
TOPICS='{"topics":[{"topic_name":"OUTGOING_MESSAGE","topic_key":"my/key"}]}' \
ros2 run minimal_publisher minimal_publisher
'''
