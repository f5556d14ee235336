"""Pure animation math: spring easing and canvas sizing"""
