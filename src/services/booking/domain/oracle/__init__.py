from .price_oracle import PriceOracle as PriceOracle
