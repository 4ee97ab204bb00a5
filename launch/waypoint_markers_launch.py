import os

from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node


def generate_launch_description():

    default_params = os.path.join(
        get_package_share_directory('vrx_waypoint_markers'),
        'config',
        'waypoint_markers.yaml'
    )

    params_file = DeclareLaunchArgument(
        'params_file',
        default_value=default_params,
        description='Parameter file for the waypoint marker node'
    )

    waypoint_markers = Node(
        package='vrx_waypoint_markers',
        executable='waypoint_markers',
        name='waypoint_markers',
        output='screen',
        parameters=[LaunchConfiguration('params_file')]
    )

    return LaunchDescription([
        params_file,
        waypoint_markers
    ])
