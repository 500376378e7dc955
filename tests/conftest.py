import matplotlib

# Headless backend for figure tests / 图表测试使用无界面后端
matplotlib.use("Agg")
