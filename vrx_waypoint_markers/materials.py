# Diffuse colours of the stock Gazebo material scripts (gazebo.material).
MATERIAL_COLORS = {
    'Gazebo/Black': (0.0, 0.0, 0.0, 1.0),
    'Gazebo/Blue': (0.0, 0.0, 1.0, 1.0),
    'Gazebo/DarkGrey': (0.175, 0.175, 0.175, 1.0),
    'Gazebo/Gold': (0.8, 0.65, 0.37, 1.0),
    'Gazebo/Green': (0.0, 1.0, 0.0, 1.0),
    'Gazebo/Grey': (0.7, 0.7, 0.7, 1.0),
    'Gazebo/Indigo': (0.33, 0.0, 0.5, 1.0),
    'Gazebo/Orange': (1.0, 0.5088, 0.0468, 1.0),
    'Gazebo/Purple': (1.0, 0.0, 1.0, 1.0),
    'Gazebo/Red': (1.0, 0.0, 0.0, 1.0),
    'Gazebo/Turquoise': (0.0, 1.0, 1.0, 1.0),
    'Gazebo/White': (1.0, 1.0, 1.0, 1.0),
    'Gazebo/Yellow': (1.0, 1.0, 0.0, 1.0),
    'Gazebo/ZincYellow': (0.9725, 0.9529, 0.2078, 1.0),
    'Gazebo/BlueTransparent': (0.0, 0.0, 1.0, 0.5),
    'Gazebo/GreenTransparent': (0.0, 1.0, 0.0, 0.5),
    'Gazebo/RedTransparent': (1.0, 0.0, 0.0, 0.5),
}

TEXT_MATERIAL = 'Gazebo/Black'


def material_color(name):
    """RGBA tuple for a Gazebo material name, or None if it is not known."""
    return MATERIAL_COLORS.get(name)
