import matplotlib

# 测试环境没有显示器
matplotlib.use("Agg")
