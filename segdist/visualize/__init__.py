from segdist.visualize.show import build_meshes, show
