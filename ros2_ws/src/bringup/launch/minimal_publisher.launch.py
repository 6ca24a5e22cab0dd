from launch import LaunchDescription
from launch_ros.actions import Node
from ament_index_python.packages import get_package_share_directory
import os


def generate_launch_description():
    config_dir = os.path.join(get_package_share_directory('bringup'), 'config')
    params_file = os.path.join(config_dir, 'minimal_publisher.yaml')

    return LaunchDescription([
        Node(
            package='minimal_publisher',
            executable='minimal_publisher',
            name='minimal_publisher',
            parameters=[params_file],
            output='screen'
        )
    ])
