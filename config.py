class Config(object):
    def __init__(self):
        self.seed = 0

        self.sizes = [2 ** k for k in range(4, 15)]
        self.n_operations = 2000
        self.update_ratio = 0.5

        self.value_min = -1000
        self.value_max = 1000

        # compare against the numpy reference every n operations
        self.check_every = 100

        self.plot_path = 'sumtree_timings.png'
